"""Rich rendering of plans and merge contexts."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
	from mergetrain.git.models import Commit
	from mergetrain.train.models import FileBreakdown, MergeContext, MergePlan

console = Console()


def render_plan(plan: MergePlan) -> None:
	"""Print a merge plan as a table of hops followed by their commits."""
	table = Table(title=f"Merge train from {escape(plan.source_branch)}")
	table.add_column("#", style="dim", justify="right")
	table.add_column("From", style="cyan")
	table.add_column("Into", style="green")
	table.add_column("Commits", justify="right")

	for index, hop in enumerate(plan.hops, start=1):
		table.add_row(str(index), escape(hop.from_branch), escape(hop.into_branch), str(hop.commit_count))

	console.print(table)
	if not plan.hops:
		console.print("[yellow]No target branches given; nothing to merge.[/yellow]")
	else:
		console.print(f"{len(plan.hops)} merges, {plan.total_commits} commits in total")

	for hop in plan.hops:
		if not hop.commits:
			continue
		console.print(f"\n[bold]{escape(hop.from_branch)} → {escape(hop.into_branch)}[/bold]")
		for commit in hop.commits:
			_print_commit(commit)

	if plan.current_branch:
		console.print(f"\nCurrent branch: [bold]{escape(plan.current_branch)}[/bold] (restore when done)")


def render_context(context: MergeContext) -> None:
	"""Print the summary, potential conflicts and optional details of a merge context."""
	summary = context.summary
	merge_branch = escape(context.merge_branch)
	into_branch = escape(context.into_branch)

	table = Table(title=f"Merging {merge_branch} into {into_branch}")
	table.add_column("", style="green")
	table.add_column(merge_branch, justify="right")
	table.add_column(into_branch, justify="right")
	table.add_row("Commits since merge base", str(summary.source_commit_count), str(summary.target_commit_count))
	table.add_row("Files changed", str(summary.source_files_count), str(summary.target_files_count))
	console.print(table)
	console.print(f"Merge base: [yellow]{escape(context.merge_base[:8])}[/yellow]")

	if context.potential_conflicts:
		console.print(f"\n[bold red]Potential conflicts ({summary.conflict_count}):[/bold red]")
		for path in context.potential_conflicts:
			console.print(f"  {path}", markup=False)
	else:
		console.print("\n[green]No files changed on both sides.[/green]")

	details = context.details
	if details is not None:
		_render_commits(f"Recent commits on {merge_branch}", details.recent_source_commits)
		_render_commits(f"Recent commits on {into_branch}", details.recent_target_commits)
		_render_files(f"Other files changed on {merge_branch}", details.source_files_changed)
		_render_files(f"Other files changed on {into_branch}", details.target_files_changed)

	if context.note:
		console.print(f"\n[dim]{escape(context.note)}[/dim]")


def _print_commit(commit: Commit) -> None:
	console.print(f"  [yellow]{escape(commit.short_hash)}[/yellow] {escape(commit.message)}")


def _render_commits(title: str, commits: tuple[Commit, ...]) -> None:
	console.print(f"\n[bold]{title}:[/bold]")
	if not commits:
		console.print("  (none)")
	for commit in commits:
		_print_commit(commit)


def _render_files(title: str, breakdown: FileBreakdown) -> None:
	console.print(f"\n[bold]{title}:[/bold]")
	if not breakdown.non_conflicting:
		console.print("  (none)")
	for path in breakdown.non_conflicting:
		console.print(f"  {path}", markup=False)
	if breakdown.truncated:
		console.print("  [dim]... more files not shown, raise --max-files to see them[/dim]")
