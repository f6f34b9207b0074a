# -*- coding: utf-8 -*-
import configparser
import logging
from pathlib import Path
from typing import Annotated, Optional, Tuple

import click
import typer

from ligen.catalog import LicenseType
from ligen.config import get_default_holder, get_detection_threshold
from ligen.console import main_console as console
from ligen.constants import (
    CLI_CREATE_END_YEAR_HELP,
    CLI_CREATE_HELP,
    CLI_CREATE_HOLDER_HELP,
    CLI_CREATE_PROJECT_NAME_HELP,
    CLI_CREATE_START_YEAR_HELP,
    CLI_CREATE_TYPE_HELP,
    CLI_DEBUG_HELP,
    CLI_DETECT_HELP,
    CLI_DETECT_THRESHOLD_HELP,
    CLI_FILE_HELP,
    CLI_LIST_HELP,
    CLI_MAIN_INTRODUCTION,
    CLI_PATH_HELP,
    CLI_SHOW_HELP,
    CLI_UPDATE_END_YEAR_HELP,
    CLI_UPDATE_HELP,
    CLI_UPDATE_HOLDER_HELP,
    CLI_UPDATE_PROJECT_NAME_HELP,
    CLI_UPDATE_START_YEAR_HELP,
    CONFIG_FILE_USER,
    DEFAULT_EPILOG,
)
from ligen.error_handlers import handle_cmd_exception
from ligen.errors import DetectionFailedError
from ligen.files import FileRepository, discover_license_file, read_text
from ligen.matchers import match, score_all
from ligen.meta import get_version
from ligen.models import current_year
from ligen.render import (
    render_detected,
    render_license,
    render_license_types,
    render_scores,
    render_written,
)
from ligen.service import Service

LOG = logging.getLogger(__name__)


def configure_logger(ctx, param, debug):
    level = logging.CRITICAL

    if debug:
        level = logging.DEBUG

    logging.basicConfig(format="%(asctime)s %(name)s => %(message)s", level=level)

    if debug:
        # Log the contents of the config.ini file
        config = configparser.ConfigParser()
        config.read(CONFIG_FILE_USER)
        LOG.debug("Config file contents:")
        for section in config.sections():
            LOG.debug("[%s]", section)
            for key, value in config.items(section):
                LOG.debug("%s = %s", key, value)

    return debug


def get_service(path: Path, file_name: Optional[str]) -> Tuple[Service, str]:
    """
    Build a service over the license files in ``path``.

    Returns:
        Tuple[Service, str]: The service and the license file name, which is
        discovered when ``file_name`` is not given.
    """
    if not file_name:
        file_name = discover_license_file(path)

    return Service(FileRepository(path)), file_name


@click.group(help=CLI_MAIN_INTRODUCTION, epilog=DEFAULT_EPILOG)
@click.option("--debug", is_flag=True, help=CLI_DEBUG_HELP, callback=configure_logger)
@click.version_option(version=get_version())
@click.pass_context
def cli(ctx, debug):
    """
    Create, detect and update the license files of a project.
    """
    LOG.info("ligen started, debug=%s", debug)


@cli.command(help=CLI_DETECT_HELP, epilog=DEFAULT_EPILOG)
@click.argument("file", required=False, type=click.Path(dir_okay=False, path_type=Path))
@click.option("--threshold", type=click.FloatRange(0.0, 1.0), default=None,
              help=CLI_DETECT_THRESHOLD_HELP)
@click.option("--path", type=click.Path(exists=True, file_okay=False, path_type=Path),
              default=Path("."), show_default=False, help=CLI_PATH_HELP)
@click.pass_context
@handle_cmd_exception
def detect(ctx, file, threshold, path):
    if threshold is None:
        threshold = get_detection_threshold()

    if file is None:
        file = path / discover_license_file(path)

    LOG.info("Detecting license of %s with threshold %s", file, threshold)
    content = read_text(file)

    scores = score_all(content)

    try:
        license_type = match(content, threshold)
    except DetectionFailedError:
        render_scores(console, scores, None)
        raise

    render_scores(console, scores, license_type)
    render_detected(console, license_type)


@cli.command(help=CLI_SHOW_HELP, epilog=DEFAULT_EPILOG)
@click.argument("file_name", metavar="FILE", required=False)
@click.option("--path", type=click.Path(exists=True, file_okay=False, path_type=Path),
              default=Path("."), show_default=False, help=CLI_PATH_HELP)
@click.pass_context
@handle_cmd_exception
def show(ctx, file_name, path):
    service, file_name = get_service(path, file_name)
    license = service.get_license(file_name)

    render_license(console, license, file_name)


@cli.command(name="list", help=CLI_LIST_HELP, epilog=DEFAULT_EPILOG)
@click.pass_context
@handle_cmd_exception
def list_licenses(ctx):
    render_license_types(console)


create_app = typer.Typer(rich_markup_mode="rich")


@create_app.command(help=CLI_CREATE_HELP, epilog=DEFAULT_EPILOG)
@handle_cmd_exception
def create(
    ctx: typer.Context,
    license_type: Annotated[
        LicenseType,
        typer.Option("--type", "-t", case_sensitive=False, help=CLI_CREATE_TYPE_HELP),
    ],
    holder: Annotated[
        Optional[str], typer.Option(show_default=False, help=CLI_CREATE_HOLDER_HELP)
    ] = None,
    project_name: Annotated[
        str, typer.Option("--project-name", help=CLI_CREATE_PROJECT_NAME_HELP)
    ] = "",
    start_year: Annotated[
        Optional[int],
        typer.Option("--start-year", show_default=False, help=CLI_CREATE_START_YEAR_HELP),
    ] = None,
    end_year: Annotated[
        int, typer.Option("--end-year", show_default=False, help=CLI_CREATE_END_YEAR_HELP)
    ] = 0,
    path: Annotated[
        Path,
        typer.Option(
            "--path",
            exists=True,
            file_okay=False,
            dir_okay=True,
            writable=True,
            show_default=False,
            help=CLI_PATH_HELP,
        ),
    ] = Path("."),
):
    if holder is None:
        holder = get_default_holder()

    if start_year is None:
        start_year = current_year()

    service = Service(FileRepository(path))
    license = service.create(project_name, holder, start_year, end_year, license_type)

    render_written(console, license.render(), str(path))


update_app = typer.Typer(rich_markup_mode="rich", help=CLI_UPDATE_HELP)

FileOption = Annotated[
    Optional[str], typer.Option("--file", show_default=False, help=CLI_FILE_HELP)
]
PathOption = Annotated[
    Path,
    typer.Option(
        "--path",
        exists=True,
        file_okay=False,
        dir_okay=True,
        writable=True,
        show_default=False,
        help=CLI_PATH_HELP,
    ),
]


@update_app.command(name="holder", help=CLI_UPDATE_HOLDER_HELP, epilog=DEFAULT_EPILOG)
@handle_cmd_exception
def update_holder(
    ctx: typer.Context,
    value: Annotated[str, typer.Argument(metavar="HOLDER")],
    file_name: FileOption = None,
    path: PathOption = Path("."),
):
    service, file_name = get_service(path, file_name)
    render_license(console, service.update_holder(file_name, value), file_name)


@update_app.command(name="project-name", help=CLI_UPDATE_PROJECT_NAME_HELP,
                    epilog=DEFAULT_EPILOG)
@handle_cmd_exception
def update_project_name(
    ctx: typer.Context,
    value: Annotated[str, typer.Argument(metavar="NAME")],
    file_name: FileOption = None,
    path: PathOption = Path("."),
):
    service, file_name = get_service(path, file_name)
    render_license(console, service.update_project_name(file_name, value), file_name)


@update_app.command(name="start-year", help=CLI_UPDATE_START_YEAR_HELP, epilog=DEFAULT_EPILOG)
@handle_cmd_exception
def update_start_year(
    ctx: typer.Context,
    value: Annotated[int, typer.Argument(metavar="YEAR")],
    file_name: FileOption = None,
    path: PathOption = Path("."),
):
    service, file_name = get_service(path, file_name)
    render_license(console, service.update_start_year(file_name, value), file_name)


@update_app.command(name="end-year", help=CLI_UPDATE_END_YEAR_HELP, epilog=DEFAULT_EPILOG)
@handle_cmd_exception
def update_end_year(
    ctx: typer.Context,
    value: Annotated[int, typer.Argument(metavar="YEAR")],
    file_name: FileOption = None,
    path: PathOption = Path("."),
):
    service, file_name = get_service(path, file_name)
    render_license(console, service.update_end_year(file_name, value), file_name)


cli.add_command(typer.main.get_command(create_app), name="create")
cli.add_command(typer.main.get_command(update_app), name="update")


if __name__ == "__main__":
    cli()
