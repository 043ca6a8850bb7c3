"""Render the human-readable ``README.md`` for a hydrated path.

The template explains how to reproduce the manifests from the dry source:
clone the repo, check out the dry SHA, then run the recorded commands.
"""

from __future__ import annotations

from pathlib import Path

from jinja2 import Environment, StrictUndefined, Template, TemplateError, TemplateSyntaxError

from hydrator.errors import ArtifactWriteError, TemplateRenderError
from hydrator.models import HydratorMetadata
from hydrator.write.files import close_logged

README_FILENAME = "README.md"

README_TEMPLATE = """\
# Manifest Hydration

To hydrate the manifests in this repository, run the following commands:

```shell
git clone {{ repo_url }}
# cd into the cloned directory
git checkout {{ dry_sha }}
{% for command in commands %}
{{ command }}
{% endfor %}
```
"""


def _parse_template(source: str = README_TEMPLATE) -> Template:
    env = Environment(
        autoescape=False,
        keep_trailing_newline=True,
        trim_blocks=True,
        undefined=StrictUndefined,
    )
    try:
        return env.from_string(source)
    except TemplateSyntaxError as exc:
        raise TemplateRenderError(f"failed to parse readme template: {exc}") from exc


def write_readme(dir_path: Path, metadata: HydratorMetadata) -> None:
    """Render the README template into ``README.md``, overwriting any old copy."""
    template = _parse_template()

    readme_path = Path(dir_path) / README_FILENAME
    try:
        handle = readme_path.open("w", encoding="utf-8")
    except OSError as exc:
        raise ArtifactWriteError(f"failed to create README file: {exc}") from exc

    try:
        template.stream(**_context(metadata)).dump(handle)
    except TemplateError as exc:
        raise TemplateRenderError(f"failed to execute readme template: {exc}") from exc
    except OSError as exc:
        raise ArtifactWriteError(f"failed to write README file: {exc}") from exc
    finally:
        close_logged(handle, readme_path)


def _context(metadata: HydratorMetadata) -> dict[str, object]:
    return {
        "repo_url": metadata.repo_url,
        "dry_sha": metadata.dry_sha,
        "commands": list(metadata.commands),
    }
