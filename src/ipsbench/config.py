"""Suite configuration and profile loading.

Handles:
- Loading suite profiles from YAML files.
- Parsing inline ``name=module:attr`` task definitions from CLI arguments.
- Merging CLI options with profile defaults.
- Importing the referenced callables.
- Validating the final configuration before execution.
"""

from __future__ import annotations

import importlib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable

from ipsbench.logging import get_logger
from ipsbench.suite import Suite

log = get_logger("config")

DEFAULT_WARMUP = 2.0
DEFAULT_MEASURE = 5.0


# ---------------------------------------------------------------------------
# SuiteConfig
# ---------------------------------------------------------------------------


@dataclass
class SuiteConfig:
    """Resolved configuration for a suite run."""

    name: str = ""
    warmup: float = DEFAULT_WARMUP  # Warm-up budget per task, seconds
    measure: float = DEFAULT_MEASURE  # Measurement budget per task, seconds
    init: str | None = None  # "module:attr" reference, None = no-op
    # Ordered (name, "module:attr") pairs; names may repeat.
    tasks: list[tuple[str, str]] = field(default_factory=list)
    interactive: bool | None = None  # None = auto (stdout is a terminal)

    def is_interactive(self, stream_isatty: bool) -> bool:
        """Whether to redraw in place."""
        if self.interactive is not None:
            return self.interactive
        return stream_isatty

    @property
    def duplicate_names(self) -> list[str]:
        """Names used by more than one task, in first-seen order."""
        seen: set[str] = set()
        duplicates: list[str] = []
        for name, _ in self.tasks:
            if name in seen and name not in duplicates:
                duplicates.append(name)
            seen.add(name)
        return duplicates

    def add_task(self, name: str, reference: str) -> None:
        self.tasks.append((name, reference))


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


@dataclass
class ValidationError:
    """A single configuration validation error."""

    field: str
    message: str
    severity: str = "error"  # "error" or "warning"


def validate_config(config: SuiteConfig) -> list[ValidationError]:
    """Validate a suite configuration.

    Returns a list of validation errors.  Empty list means valid.
    """
    errors: list[ValidationError] = []

    if not config.tasks:
        errors.append(
            ValidationError(
                field="tasks",
                message="No tasks defined. Use --profile or --task to define at least one.",
            )
        )

    for name, _ in config.tasks:
        if not name or not name.strip():
            errors.append(ValidationError(field="tasks", message="Task names must be non-empty."))

    for name in config.duplicate_names:
        errors.append(
            ValidationError(
                field=f"tasks.{name}",
                message=(
                    f"Task name '{name}' is used more than once; "
                    f"its rows will be hard to tell apart."
                ),
                severity="warning",
            )
        )

    for key in ("warmup", "measure"):
        value = getattr(config, key)
        if not isinstance(value, (int, float)) or isinstance(value, bool):
            errors.append(
                ValidationError(
                    field=key,
                    message=f"{key.capitalize()} must be a number of seconds (got {value!r}).",
                )
            )
        elif value <= 0:
            errors.append(
                ValidationError(
                    field=key,
                    message=(
                        f"{key.capitalize()} budget is not positive ({value}); "
                        f"each task will run only once in that phase."
                    ),
                    severity="warning",
                )
            )

    references = [(f"tasks.{name}", ref) for name, ref in config.tasks]
    if config.init:
        references.append(("init", config.init))
    for field_name, reference in references:
        try:
            resolve_callable(reference)
        except ValueError as exc:
            errors.append(ValidationError(field=field_name, message=str(exc)))

    return errors


# ---------------------------------------------------------------------------
# Callable references
# ---------------------------------------------------------------------------


def resolve_callable(reference: str) -> Callable[[], object]:
    """Import the callable named by ``"package.module:attr"``.

    Dotted attributes after the colon are followed, so
    ``"pkg.mod:Class.method"`` works for static methods.

    Raises:
        ValueError: If the reference is malformed, cannot be imported,
            or does not name a callable.
    """
    if ":" not in reference:
        raise ValueError(f"Invalid callable reference '{reference}'. Expected 'module:attr'.")
    module_name, attr_path = reference.split(":", 1)
    module_name = module_name.strip()
    attr_path = attr_path.strip()
    if not module_name or not attr_path:
        raise ValueError(f"Invalid callable reference '{reference}'. Expected 'module:attr'.")

    try:
        obj: Any = importlib.import_module(module_name)
    except ImportError as exc:
        raise ValueError(f"Cannot import module '{module_name}': {exc}") from exc

    for part in attr_path.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as exc:
            raise ValueError(f"Module '{module_name}' has no attribute '{attr_path}'") from exc

    if not callable(obj):
        raise ValueError(f"'{reference}' is not callable")
    return obj


def parse_task_spec(spec: str) -> tuple[str, str]:
    """Parse an inline task definition from CLI.

    Format: ``"name=module:attr"``.  The name may contain spaces; the
    reference is everything after the last ``=``.

    Examples::

        "builtin sort=ipsbench.demo:builtin_sort"

    Returns:
        ``(name, reference)``.
    """
    if "=" not in spec:
        raise ValueError(f"Invalid task spec: '{spec}'. Expected format: 'name=module:attr'")
    name, reference = spec.rsplit("=", 1)
    name = name.strip()
    reference = reference.strip()
    if not name:
        raise ValueError(f"Task name cannot be empty in '{spec}'.")
    if ":" not in reference:
        raise ValueError(
            f"Invalid reference in task '{name}': '{reference}'. Expected 'module:attr'."
        )
    return name, reference


# ---------------------------------------------------------------------------
# YAML profile loading
# ---------------------------------------------------------------------------


def load_profile(profile_path: Path) -> dict[str, Any]:
    """Load a suite profile from a YAML file.

    Profile format::

        name: "sorting"
        warmup: 2
        measure: 5
        init: "mybench:reshuffle"
        tasks:
          selection sort: "mybench:selection_sort"
          builtin sort: "mybench:builtin_sort"

    ``tasks`` may also be a list of ``{name: ..., operation: ...}``
    mappings.

    Returns:
        The parsed YAML as a dict.
    """
    import yaml

    if not profile_path.exists():
        raise FileNotFoundError(f"Profile not found: {profile_path}")

    data = yaml.safe_load(profile_path.read_text())

    if not isinstance(data, dict):
        raise ValueError(f"Profile must be a YAML mapping, got {type(data).__name__}")

    return data


def _profile_tasks(tasks_data: Any) -> list[tuple[str, str]]:
    if tasks_data is None:
        return []
    if isinstance(tasks_data, dict):
        return [(str(name), str(ref)) for name, ref in tasks_data.items()]
    if isinstance(tasks_data, list):
        pairs: list[tuple[str, str]] = []
        for entry in tasks_data:
            if not isinstance(entry, dict) or "name" not in entry or "operation" not in entry:
                raise ValueError(
                    "Each entry of profile 'tasks' must be a mapping with 'name' and 'operation'"
                )
            pairs.append((str(entry["name"]), str(entry["operation"])))
        return pairs
    raise ValueError(
        f"Profile 'tasks' must be a mapping or a list, got {type(tasks_data).__name__}"
    )


def config_from_profile(
    profile_data: dict[str, Any],
    *,
    cli_overrides: dict[str, Any] | None = None,
) -> SuiteConfig:
    """Build a SuiteConfig from a parsed YAML profile.

    CLI overrides take precedence over profile values for name, warmup,
    measure, init and interactive.  Tasks given on the CLI are appended
    after the profile's tasks.

    Args:
        profile_data: Parsed YAML profile dict.
        cli_overrides: Dict of CLI option values.  Keys match SuiteConfig
            field names, plus ``tasks`` as a list of ``(name, reference)``.
    """
    cli = cli_overrides or {}

    config = SuiteConfig(
        name=cli.get("name") or profile_data.get("name", ""),
        warmup=(
            cli["warmup"]
            if cli.get("warmup") is not None
            else profile_data.get("warmup", DEFAULT_WARMUP)
        ),
        measure=(
            cli["measure"]
            if cli.get("measure") is not None
            else profile_data.get("measure", DEFAULT_MEASURE)
        ),
        init=cli.get("init") or profile_data.get("init"),
        interactive=(
            cli["interactive"]
            if cli.get("interactive") is not None
            else profile_data.get("interactive")
        ),
    )

    for name, reference in _profile_tasks(profile_data.get("tasks")):
        config.add_task(name, reference)
    for name, reference in cli.get("tasks", []):
        config.add_task(name, reference)

    return config


# ---------------------------------------------------------------------------
# Suite construction
# ---------------------------------------------------------------------------


def build_suite(config: SuiteConfig, **kwargs: Any) -> Suite:
    """Import every reference in *config* and build a :class:`Suite`.

    Extra keyword arguments are passed to the Suite constructor.
    """
    init = resolve_callable(config.init) if config.init else None
    tasks = [(name, resolve_callable(ref)) for name, ref in config.tasks]
    log.debug("Built suite '%s' with %d task(s)", config.name or "unnamed", len(tasks))
    return Suite(init, tasks, **kwargs)
