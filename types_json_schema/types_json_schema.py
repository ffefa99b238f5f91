import json
import logging
from pathlib import Path

import click

from .checker import check_schema
from .compiler import SchemaCompiler
from .config import CompilerOptions, OutputMode
from .errors import SchemaCompilationError
from .output import AtomicWriter
from .schema_ast import AstParser

logger = logging.getLogger(__name__)


@click.command()
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option("--root", is_flag=True, default=False, help='Add the "$schema" marker to the document')
@click.option("--loose", is_flag=True, default=False, help="Drop unknown predicates instead of failing")
@click.option("--force", "-f", is_flag=True, default=False, help="Overwrite an existing output file")
@click.option("--check", is_flag=True, default=False, help="Check the document against the draft-06 meta-schema")
@click.option("--verbose", "-v", is_flag=True, default=False)
@click.argument("path", type=click.Path(exists=True, resolve_path=True))
@click.argument("output", default=None, required=False, type=click.Path(resolve_path=True))
def types_json_schema(config, root, loose, force, check, verbose, path, output):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    if config is not None:
        with open(config) as f:
            options = CompilerOptions.from_dict(json.load(f))
    else:
        options = CompilerOptions()

    # CLI flags override the config file when set
    if root:
        options.root = True
    if loose:
        options.loose = True
    if force:
        options.output.mode = OutputMode.FORCE
    if check:
        options.output.check_schema = True

    with open(path) as f:
        data = json.load(f)

    try:
        ast = AstParser().parse(data)
        document = SchemaCompiler(options).compile(ast)
        if options.output.check_schema:
            check_schema(document)
    except SchemaCompilationError as e:
        raise click.ClickException(str(e)) from e

    content = json.dumps(document, indent=options.output.indent) + "\n"

    if output is None:
        click.echo(content, nl=False)
        return

    write_output(Path(output), content, options)


def write_output(path: Path, content: str, options: CompilerOptions) -> None:
    """Write the document according to the output configuration."""
    validate = options.output.check_schema
    overwrite = options.output.mode is OutputMode.FORCE

    try:
        if not options.output.atomic_write:
            if not overwrite and path.exists():
                raise FileExistsError(f"Output file already exists: {path}. Use --force to overwrite.")
            path.write_text(content, encoding="utf-8")
        elif overwrite:
            AtomicWriter().write(path, content, validate)
        else:
            AtomicWriter().write_if_not_exists(path, content, validate)
    except (FileExistsError, SchemaCompilationError) as e:
        raise click.ClickException(str(e)) from e

    logger.info("Schema written to %s", path)
