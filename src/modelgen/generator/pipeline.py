"""Main pipeline for arguments → binding → generated files."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from functools import partial
from pathlib import Path
from typing import Dict, List, Optional, Sequence
from modelgen.config.options import GeneratorOptions
from modelgen.config.settings import Settings
from modelgen.ir.binding import GenerationBinding, OutputFile
from modelgen.generator.errors import InvalidArguments
from modelgen.generator.classifier import SEPARATOR, classify_all
from modelgen.generator.types import resolve_all
from modelgen.generator.partition import partition
from modelgen.generator.associations import derive_associations, derive_indexes
from modelgen.generator.defaults import derive_defaults, derive_types
from modelgen.generator.binding import assemble
from modelgen.naming.inflector import inflect, params, check_module_name_availability
from modelgen.templates.loader import create_environment, render_template
from modelgen.utils.file_writer import Confirm, Report, write_files
from modelgen.config.logging import get_logger

logger = get_logger(__name__)


@dataclass
class GenerationResult:
    """Outcome of one generator run."""

    binding: GenerationBinding
    files: List[OutputFile]
    written: List[Path] = field(default_factory=list)


def validate_args(singular: str, plural: str) -> None:
    """
    Check the resource names before any attribute is parsed.

    Raises:
        InvalidArguments: If a name is empty or looks like an attribute
    """
    for name in (singular, plural):
        if not name or SEPARATOR in name:
            raise InvalidArguments()


def timestamp(now: Optional[datetime] = None) -> str:
    """UTC timestamp as YYYYMMDDHHMMSS."""
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).strftime("%Y%m%d%H%M%S")


def build_binding(
    singular: str,
    plural: str,
    tokens: Sequence[str],
    options: GeneratorOptions,
    settings: Settings,
) -> GenerationBinding:
    """
    Parse, resolve and derive everything the templates need.

    Every token is classified before any is resolved, and all of them are
    resolved before the module-availability check and assembly.

    Args:
        singular: Resource name, possibly namespaced ("Admin.User")
        plural: Table name ("users")
        tokens: Raw attribute tokens
        options: Merged generator options
        settings: Project layout settings

    Returns:
        Immutable GenerationBinding
    """
    validate_args(singular, plural)

    classified = classify_all(tokens)
    resolved = resolve_all(classified)

    inflection = inflect(singular, base=settings.base_module)
    example_params = params(resolved)
    check_module_name_availability(inflection, settings.project_root)

    refs, plain = partition(resolved)
    logger.info(
        f"Generating {inflection.module} with {len(plain)} attribute(s) "
        f"and {len(refs)} association(s)"
    )

    return assemble(
        inflection=inflection,
        plural=plural,
        attrs=plain,
        types=derive_types(plain),
        assocs=derive_associations(refs, partial(inflect, base=settings.base_module)),
        indexes=derive_indexes(plural, refs),
        defaults=derive_defaults(plain),
        params=example_params,
        binary_id=options.binary_id,
    )


def plan_files(
    binding: GenerationBinding,
    options: GeneratorOptions,
    settings: Settings,
    stamp: str,
) -> List[OutputFile]:
    """Templates to render and their destinations, migration first."""
    root = Path(settings.project_root)
    directory, _, name = binding.path.rpartition("/")

    files = [
        OutputFile(
            template="model.py.j2",
            destination=root / settings.models_dir / f"{binding.path}.py",
        ),
        OutputFile(
            template="model_test.py.j2",
            destination=root / settings.tests_dir / directory / f"test_{name}.py",
        ),
    ]
    if options.migration:
        migration = binding.path.replace("/", "_")
        files.insert(
            0,
            OutputFile(
                template="migration.py.j2",
                destination=root / settings.migrations_dir / f"{stamp}_create_{migration}.py",
            ),
        )
    return files


def render_files(
    binding: GenerationBinding,
    files: Sequence[OutputFile],
    settings: Settings,
    stamp: str,
) -> Dict[Path, str]:
    """Render every planned file; nothing is written here."""
    env = create_environment(settings.template_overrides_dir)
    context = binding.template_context()
    context["timestamp"] = stamp
    return {f.destination: render_template(env, f.template, context) for f in files}


def generate(
    singular: str,
    plural: str,
    tokens: Sequence[str],
    options: GeneratorOptions,
    settings: Settings,
    confirm: Optional[Confirm] = None,
    force: bool = False,
    report: Optional[Report] = None,
    now: Optional[datetime] = None,
) -> GenerationResult:
    """
    Run the generator end to end.

    Any GeneratorError is raised before a single file is written.

    Args:
        singular: Resource name
        plural: Table name
        tokens: Raw attribute tokens
        options: Merged generator options
        settings: Project layout settings
        confirm: Asked before overwriting an existing file
        force: Overwrite existing files without asking
        report: Receives progress lines
        now: Clock override for the migration timestamp

    Returns:
        GenerationResult with the binding, planned files and written paths
    """
    binding = build_binding(singular, plural, tokens, options, settings)
    stamp = timestamp(now)
    files = plan_files(binding, options, settings, stamp)
    rendered = render_files(binding, files, settings, stamp)
    written = write_files(rendered, confirm=confirm, force=force, report=report)
    return GenerationResult(binding=binding, files=files, written=written)
