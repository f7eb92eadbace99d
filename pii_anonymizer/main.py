import json
import sys
from typing import TextIO

import click

from pii_anonymizer.anonymization.factory import AnonymizerFactory
from pii_anonymizer.anonymization.models import AnonymizationConfig
from pii_anonymizer.config.settings import Settings
from pii_anonymizer.logging.logger import Log
from pii_anonymizer.service.handler import AnonymizationHandler

_FLAGS = click.Choice(AnonymizationConfig.flag_names())


@click.command()
@click.argument("input_file", type=click.File("r", encoding="utf-8"), default="-")
@click.option("--disable", "disabled", multiple=True, type=_FLAGS, help="Entity class to keep.")
@click.option("--enable", "enabled", multiple=True, type=_FLAGS, help="Entity class to redact.")
def main(input_file: TextIO, disabled: tuple[str, ...], enabled: tuple[str, ...]) -> None:
    """Anonymize INPUT_FILE (stdin by default) and print the result as JSON."""
    settings = Settings()
    Log.configure(settings.log_level, stream=sys.stderr)

    handler = AnonymizationHandler(
        AnonymizerFactory.create(settings),
        default_config=AnonymizerFactory.default_config(settings),
    )
    config = {flag: False for flag in disabled}
    config.update({flag: True for flag in enabled})

    response = handler.handle({"text": input_file.read(), "config": config})
    click.echo(json.dumps(response.body, ensure_ascii=False, indent=2))
    sys.exit(0 if response.ok else 1)


if __name__ == "__main__":
    main()
