"""Deployment environment, set through ENVIRONMENT.

Only DEVELOPMENT changes behavior: console-rendered logs and the /config
endpoint. The others differ only in name.
"""

from enum import Enum


class Environment(str, Enum):
    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
