from docs_archiver.cli import cli

cli(prog_name="docs-archiver")
