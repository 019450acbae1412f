"""
Shared helper utilities for CDK stack construction.

This module provides:
- Region abbreviation mapping for resource naming
- Resource naming function (rn)
- Environment and context configuration utilities
"""

import os
from pathlib import Path
from typing import Any, Callable, Optional, Union

# Region abbreviation mapping for resource naming
# Pattern: {name}-{region_abbrev}-{env} e.g. cdk-product-api-ue1-dev
REGION_ABBREVIATIONS: dict[str, str] = {
    "us-east-1": "ue1",
    "us-east-2": "ue2",
    "us-west-1": "uw1",
    "us-west-2": "uw2",
    "eu-west-1": "ew1",
    "eu-west-2": "ew2",
    "eu-west-3": "ew3",
    "eu-central-1": "ec1",
    "eu-north-1": "en1",
    "ap-northeast-1": "ane1",  # Tokyo
    "ap-northeast-2": "ane2",  # Seoul
    "ap-northeast-3": "ane3",  # Osaka
    "ap-southeast-1": "ase1",  # Singapore
    "ap-southeast-2": "ase2",  # Sydney
    "ap-south-1": "as1",  # Mumbai
    "sa-east-1": "se1",  # São Paulo
    "ca-central-1": "cc1",  # Canada
}


def get_region() -> str:
    """Get the AWS region from environment variables or default to us-east-1."""
    return os.getenv("AWS_REGION") or os.getenv("CDK_DEFAULT_REGION") or "us-east-1"


def get_region_abbrev(region: Optional[str] = None) -> str:
    """Get the region abbreviation for resource naming.

    Args:
        region: AWS region code. If None, reads from environment.

    Returns:
        Region abbreviation (e.g., 'ue1' for 'us-east-1')
    """
    if region is None:
        region = get_region()
    return REGION_ABBREVIATIONS.get(region, region[:3])


def make_resource_namer(region_abbrev: str, env_name: str) -> Callable[..., str]:
    """Create a resource naming function.

    Args:
        region_abbrev: Region abbreviation (e.g., 'ue1')
        env_name: Environment name (e.g., 'dev', 'prod')

    Returns:
        A function that takes a base name and returns a fully qualified name
    """

    def rn(name: str, abbrev: str = region_abbrev, env: str = env_name) -> str:
        """Generate resource name with region and environment suffix."""
        return f"{name}-{abbrev}-{env}"

    return rn


def get_context_bool(scope: Any, key: str, default: bool = False) -> bool:
    """Read a boolean CDK context value.

    Context passed with ``-c key=value`` arrives as a string, while values from
    cdk.json arrive as real booleans, so both forms are accepted.

    Args:
        scope: CDK construct scope
        key: Context key
        default: Value used when the key is not set

    Returns:
        The context value as a bool
    """
    value = scope.node.try_get_context(key)
    if value is None:
        return default
    if isinstance(value, str):
        return value.strip().lower() == "true"
    return bool(value)


def load_env_file(path: Union[str, Path]) -> dict[str, str]:
    """Load KEY=VALUE pairs from a .env file into os.environ.

    Variables already present in the environment win over the file.

    Args:
        path: Path to the .env file

    Returns:
        The variables that were actually set from the file
    """
    env_file = Path(path)
    loaded: dict[str, str] = {}
    if not env_file.exists():
        return loaded

    with open(env_file) as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue
            key, value = line.split("=", 1)
            key = key.strip()
            # Only set if not already in environment (allow override)
            if key and not os.getenv(key):
                os.environ[key] = value.strip()
                loaded[key] = value.strip()
    return loaded
