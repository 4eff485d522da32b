from nanostat.cli import run

run()
