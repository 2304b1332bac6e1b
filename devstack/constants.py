from __future__ import annotations

from enum import Enum


class Color:
    RED = "\033[0;31m"
    GREEN = "\033[0;32m"
    YELLOW = "\033[1;33m"
    BOLD = "\033[1m"
    RESET = "\033[0m"


class Verb(str, Enum):
    START = "start"
    STOP = "stop"
    RESTART = "restart"
    STATUS = "status"
    LOGS = "logs"
    REBUILD = "rebuild"
    REBUILD_START = "rebuild-start"


class SectionName(str, Enum):
    DB = "db"
    PRODUCT = "product"
    SALES = "sales"


LOGS_ALL = "all"

LOGGER_NAME = "devstack"
# Same status a shell reports for a process ended by SIGINT
INTERRUPTED_EXIT_CODE = 130
CONFIG_FILE_NAME = "devstack.yml"
CONFIG_FILE_ENV_KEY = "DEVSTACK_CONFIG"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

# Versions older than this still run, we only warn
MINIMUM_DOCKER_COMPOSE_VERSION = "1.29.0"

DEFAULT_PROJECT_NAME = "ecommerce"
# Fixed pause after the database comes up, there is no readiness probe
DEFAULT_STARTUP_DELAY = 10

DEFAULT_SECTIONS: dict[SectionName, dict[str, str | bool]] = {
    SectionName.DB: {
        "description": "database",
        "compose_file": "docker-compose-db.yml",
        "env_file": ".env.db",
        "no_cache_build": False,
    },
    SectionName.PRODUCT: {
        "description": "product service",
        "compose_file": "docker-compose-product-service.yml",
        "env_file": ".env.app",
        "no_cache_build": True,
    },
    SectionName.SALES: {
        "description": "sales service",
        "compose_file": "docker-compose-sales-service.yml",
        "env_file": ".env.sales",
        "no_cache_build": True,
    },
}

START_ORDER = (SectionName.DB, SectionName.PRODUCT, SectionName.SALES)
TEARDOWN_ORDER = (SectionName.SALES, SectionName.PRODUCT, SectionName.DB)
