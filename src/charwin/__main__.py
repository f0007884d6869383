from charwin.cli import cli

cli()
