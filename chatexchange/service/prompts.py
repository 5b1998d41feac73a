# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from jinja2 import (
    ChoiceLoader,
    DictLoader,
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateError,
    TemplateNotFound,
)

from .._errors import RenderError
from ..config import settings
from ..messages.formatting import is_record, record_fields

__all__ = ("PromptManager",)

logger = logging.getLogger(__name__)


class PromptManager:
    """Renders named prompt templates with positional arguments.

    Templates are looked up in the in-memory mapping first, then in the
    template directory, as ``<name>`` or ``<name><suffix>``. Positional
    arguments are visible to templates as ``args``; when a single record is
    passed its fields are visible by name as well.
    """

    def __init__(
        self,
        templates: Mapping[str, str] | None = None,
        directory: str | Path | None = None,
        suffix: str | None = None,
    ):
        self.directory = (
            Path(directory)
            if directory is not None
            else settings.CHATEXCHANGE_PROMPT_DIR
        )
        self.suffix = (
            suffix if suffix is not None else settings.CHATEXCHANGE_PROMPT_SUFFIX
        )
        self._templates = DictLoader(dict(templates or {}))
        loaders = [self._templates]
        if self.directory is not None:
            loaders.append(FileSystemLoader(self.directory))
        self.env = Environment(
            loader=ChoiceLoader(loaders),
            undefined=StrictUndefined,
            keep_trailing_newline=False,
            autoescape=False,
        )
        logger.debug(
            f"Initialized PromptManager with {len(self._templates.mapping)} "
            f"inline templates, directory={self.directory}"
        )

    def register(self, name: str, source: str) -> None:
        self._templates.mapping[name] = source

    def has_template(self, name: str) -> bool:
        try:
            self._select(name)
        except RenderError:
            return False
        return True

    def _select(self, name: str):
        candidates = [name]
        if self.suffix and not name.endswith(self.suffix):
            candidates.append(f"{name}{self.suffix}")
        try:
            return self.env.select_template(candidates)
        except TemplateNotFound as e:
            raise RenderError(
                f"Prompt template '{name}' not found",
                details={"template": name, "candidates": candidates},
                status_code=404,
                cause=e,
            ) from e
        except TemplateError as e:
            raise RenderError(
                f"Prompt template '{name}' is invalid: {e}",
                details={"template": name},
                cause=e,
            ) from e

    def render(self, name: str, args: Sequence[Any] | None = None) -> str:
        template = self._select(name)
        args = list(args or ())
        context: dict[str, Any] = {}
        if len(args) == 1 and is_record(args[0]):
            context.update(record_fields(args[0]))
        context["args"] = args
        try:
            return template.render(**context)
        except TemplateError as e:
            raise RenderError(
                f"Failed to render prompt template '{name}': {e}",
                details={"template": name, "args": len(args)},
                cause=e,
            ) from e
