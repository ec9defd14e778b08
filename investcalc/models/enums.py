from enum import Enum


class DeploymentType(str, Enum):
    LOCAL = "local"
    CLOUD = "cloud"
