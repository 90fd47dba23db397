"""Main module entrypoint for local runtime execution.

This module validates startup configuration and launches the FastAPI service.
"""

import argparse
import json
import logging

import uvicorn

from revops.bootstrap import bootstrap_create_application, bootstrap_create_database_health_check
from revops.config import config_configure_logging, config_load_settings

logger = logging.getLogger(__name__)


def main() -> None:
    """Run selected runtime command with validated startup configuration.

    Returns:
        None: This function does not return a runtime value.

    Raises:
        SettingsLoadError: Raised when configuration validation fails.
    """

    argument_parser = argparse.ArgumentParser(description="LSU Game Room RevOps runtime entrypoint")
    argument_parser.add_argument(
        "command",
        nargs="?",
        default="api",
        choices=("api", "db-health"),
        help="Runtime command: `api` starts server, `db-health` runs one database health check",
        type=str,
    )
    parsed_arguments = argument_parser.parse_args()

    settings = config_load_settings()
    config_configure_logging(level=settings.log_level)

    if parsed_arguments.command == "db-health":
        health_check = bootstrap_create_database_health_check(settings)
        logger.info("Checking database health for %s", health_check.db_connection_label())
        check_result = health_check.db_check_database_health()
        print(json.dumps(check_result.health_to_payload(), indent=2))
        if not check_result.health_is_success():
            raise SystemExit(1)
        return

    application = bootstrap_create_application(settings)
    uvicorn.run(
        application,
        host=settings.application_host,
        port=settings.application_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
