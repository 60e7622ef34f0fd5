#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""RingTEA command-line interface entrypoint."""

from __future__ import annotations

from attrs import evolve
import click
from provide.foundation import CLIContext, TelemetryConfig, get_hub
from provide.foundation.utils import get_version

from ringtea.commands.cipher import decrypt_command, encrypt_command
from ringtea.config import RingTeaRuntimeConfig

__version__ = get_version("ringtea", caller_file=__file__)


@click.group(context_settings=dict(help_option_names=["-h", "--help"]))
@click.version_option(
    __version__,
    "-V",
    "--version",
    prog_name="ringtea",
    message="%(prog)s version %(version)s",
)
@click.pass_context
def cli(ctx: click.Context) -> None:
    """XXTEA encryption and decryption tool.

    Configure via environment variables:
    - RINGTEA_LOG_LEVEL: Log level (trace, debug, info, warning, error)
    - RINGTEA_FORMAT: Default ciphertext encoding (raw, hex, base64)
    - RINGTEA_KEY: Default key when --key is not given
    - PROVIDE_LOG_FILE: Write logs to file
    """
    ctx.ensure_object(dict)

    ringtea_config = RingTeaRuntimeConfig.from_env()
    cli_ctx = CLIContext.from_env()
    base_telemetry = TelemetryConfig.from_env()

    telemetry_config = evolve(
        base_telemetry,
        service_name="ringtea",
        logging=evolve(
            base_telemetry.logging,
            default_level=ringtea_config.log_level,  # type: ignore[arg-type]
        ),
    )

    hub = get_hub()
    hub.initialize_foundation(telemetry_config)

    ctx.obj["cli_context"] = cli_ctx
    ctx.obj["log"] = cli_ctx.logger


cli.add_command(encrypt_command, name="encrypt")
cli.add_command(decrypt_command, name="decrypt")

main = cli

if __name__ == "__main__":
    cli()

# 🍵🔁🔚
