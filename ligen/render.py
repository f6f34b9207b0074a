from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ligen.catalog import CATALOG, LicenseType, catalog_entry
from ligen.console import check_mark
from ligen.ligen import License
from ligen.matchers import Score
from ligen.models import Writeable


def format_years(start_year: int, end_year: int) -> str:
    if end_year > 0:
        return f"{start_year}-{end_year}"

    return f"{start_year}"


def render_license_types(console: Console) -> None:
    """
    Print a table with every supported license, in catalog order.
    """
    table = Table(title="Supported licenses", show_lines=True)
    table.add_column("Type", style="license_type")
    table.add_column("License", style="license_title")
    table.add_column("Files", style="path")
    table.add_column("Notice")
    table.add_column("Copyright")

    for entry in CATALOG:
        table.add_row(
            str(entry.license_type),
            entry.title,
            ", ".join(entry.artifacts),
            "yes" if entry.requires_notice else "no",
            "yes" if entry.requires_copyright else "no",
        )

    console.print(table)


def render_license(console: Console, license: License, path: str) -> None:
    """
    Print the fields of a loaded license.

    Args:
        console (Console): The console to print to.
        license (License): The loaded license.
        path (str): The license file the license was loaded from.
    """
    entry = catalog_entry(license.license_type)

    console.print(f"[license_title]{entry.title}[/license_title] "
                  f"([license_type]{license.license_type}[/license_type])")
    console.print(f"File: [path]{escape(path)}[/path]")

    if license.license_type.requires_notice:
        console.print(f"Project: [bold]{escape(license.project_name)}[/bold]")

    if license.license_type.requires_copyright:
        years = format_years(license.copyright.start_year, license.copyright.end_year)
        console.print(f"Copyright: [year]{years}[/year] "
                      f"[holder]{escape(license.copyright.holder)}[/holder]")
    else:
        console.print("Copyright: [low_score]not required[/low_score]")


def render_scores(console: Console, scores: List[Score], detected: Optional[LicenseType]) -> None:
    """
    Print the similarity of a text to every supported license. The detected
    license, if any, is highlighted.
    """
    table = Table(title="Similarity", show_lines=False)
    table.add_column("Type", style="license_type")
    table.add_column("Score", justify="right")

    for candidate in scores:
        style = "best_score" if candidate.license_type is detected else "low_score"
        table.add_row(str(candidate.license_type),
                      f"[{style}]{candidate.coefficient:.4f}[/{style}]")

    console.print(table)


def render_detected(console: Console, license_type: LicenseType) -> None:
    console.print(f"[success]{check_mark()}[/success] Detected "
                  f"[license_type]{license_type}[/license_type]")


def render_written(console: Console, writeables: List[Writeable], root: str) -> None:
    for writeable in writeables:
        console.print(f"[success]{check_mark()}[/success] Wrote "
                      f"[path]{escape(writeable.path)}[/path] in {escape(root)}")
