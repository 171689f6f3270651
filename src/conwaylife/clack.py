from __future__ import annotations
import logging
from typing import Any
import click

log = logging.getLogger(__name__)


class ConfigurableCommand(click.Command):
    """
    A command whose option defaults can be set from the ``[options]`` table of
    the configuration file.  ``allow_config`` and ``disallow_config`` restrict
    which parameters may be set that way.
    """

    def __init__(
        self,
        allow_config: list[str] | None = None,
        disallow_config: list[str] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self.allow_config = allow_config
        self.disallow_config = disallow_config

    def is_configurable(self, paramname: str) -> bool:
        return (self.allow_config is None or paramname in self.allow_config) and (
            self.disallow_config is None or paramname not in self.disallow_config
        )

    def process_config(self, cfg: dict[str, Any]) -> dict[str, Any]:
        out_cfg: dict[str, Any] = {}
        params = {p.name for p in self.params}
        for k, v in cfg.items():
            k = k.replace("-", "_")
            if k in params and self.is_configurable(k):
                # Flags keep their booleans; everything else goes through the
                # parameter's type conversion as a string.
                out_cfg[k] = v if isinstance(v, bool) else str(v)
        return out_cfg


class ConfigurableGroup(ConfigurableCommand, click.Group):
    def process_config(self, cfg: dict[str, Any]) -> dict[str, Any]:
        out_cfg = super().process_config(cfg)
        for cmdname, cmdobj in self.commands.items():
            if not isinstance(cmdobj, ConfigurableCommand) or cmdname not in cfg:
                continue
            if isinstance(c := cfg[cmdname], dict):
                out_cfg[cmdname] = cmdobj.process_config(c)
            else:
                log.warning(
                    "Ignoring non-table configuration for %r command: %r", cmdname, c
                )
        return out_cfg
