from fromposix.cli import run

run()
