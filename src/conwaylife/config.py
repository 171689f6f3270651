from __future__ import annotations
import logging
from pathlib import Path
import sys
import click
from .clack import ConfigurableGroup

if sys.version_info[:2] >= (3, 11):
    from tomllib import TOMLDecodeError
    from tomllib import load as toml_load
else:
    from tomli import TOMLDecodeError
    from tomli import load as toml_load

log = logging.getLogger(__name__)

DEFAULT_CFG = Path.home() / ".config" / "conway-life.toml"


def configure(
    ctx: click.Context, param: click.Parameter, filename: str | Path
) -> None:
    try:
        with open(filename, "rb") as fp:
            cfg = toml_load(fp)
    except FileNotFoundError:
        cfg = {}
    except TOMLDecodeError as e:
        raise click.BadParameter(f"{filename}: {e}", ctx=ctx, param=param)
    opts = cfg.get("options")
    if opts is None:
        return
    if isinstance(opts, dict):
        from .__main__ import main

        assert isinstance(main, ConfigurableGroup)
        ctx.default_map = main.process_config(opts)
    else:
        log.warning("%s: 'options' is not a table; ignoring", filename)
