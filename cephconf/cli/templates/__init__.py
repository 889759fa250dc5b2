"""Templates module for generating Ceph config files.

This module loads the Jinja2 templates shipped with the package. Templates
only substitute values; any conditional logic is resolved by the caller
before the context reaches the template.
"""

from functools import lru_cache
from pathlib import Path
from typing import Union, Optional, Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template


def format_value(value: Any) -> Any:
    """Format a context value the way Ceph config files spell it.

    Booleans become ``true``/``false`` and sequences are comma-joined.
    Everything else is left for Jinja2 to stringify.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(str(format_value(item)) for item in value)
    return value


@lru_cache(maxsize=None)
def _environment(module_path: Path) -> Environment:
    # Autoescape would corrupt INI output
    return Environment(  # nosec B701
        loader=FileSystemLoader(module_path),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
        undefined=StrictUndefined,
        finalize=format_value,
    )


def get_template(template_path: Union[str, Path], template_name: str) -> Template:
    """Load a compiled template.

    Args:
        template_path: Path to the template directory or module name
        template_name: Name of the template file

    Returns:
        Template: The compiled template

    Raises:
        ValueError: If the template directory does not exist
        jinja2.TemplateNotFound: If the template file does not exist
    """
    # If template_path is a string, it's a directory next to this module
    if isinstance(template_path, str):
        module_path = Path(__file__).parent / template_path
        if not module_path.exists():
            raise ValueError(f"Template module path not found: {module_path}")
    else:
        module_path = template_path

    return _environment(module_path).get_template(template_name)


def render_template_from_file(
    template_path: Union[str, Path],
    template_name: str,
    context: dict[str, Any],
    output_path: Optional[Path] = None,
) -> str:
    """Render a template from a file.

    Args:
        template_path: Path to the template directory or module name
        template_name: Name of the template file
        context: Context variables for the template
        output_path: Optional path to write the rendered template

    Returns:
        str: The rendered template

    Raises:
        jinja2.UndefinedError: If the template references a missing variable
    """
    rendered = get_template(template_path, template_name).render(context)

    if output_path:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(rendered)

    return rendered


__all__ = ["format_value", "get_template", "render_template_from_file"]
