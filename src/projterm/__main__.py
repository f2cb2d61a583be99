from projterm.cli import run

run()
