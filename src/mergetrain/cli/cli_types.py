"""Type definitions for CLI parameters."""

from typing import Annotated

import typer

JsonFlag = Annotated[
	bool,
	typer.Option(
		"--json",
		help="Print the result as a JSON document instead of tables",
	),
]

DetailsFlag = Annotated[
	bool | None,
	typer.Option(
		"--details/--summary",
		help="Include commit and file lists (default from config)",
		show_default=False,
	),
]

MaxCommitsOpt = Annotated[
	int | None,
	typer.Option(
		"--max-commits",
		min=0,
		help="Most recent commits to list per side (default from config)",
	),
]

MaxFilesOpt = Annotated[
	int | None,
	typer.Option(
		"--max-files",
		min=0,
		help="Non-conflicting files to list per side (default from config)",
	),
]
