"""YAML Configuration Loader for Supplier Directory.

Loads and caches the directory catalogue (categories, filter suggestions,
sort options and feature flag defaults) with fallback to built-in defaults.
"""

from pathlib import Path
from typing import Any, Dict, List
from dataclasses import dataclass
from functools import lru_cache
import yaml

# Get config directory
CONFIG_DIR = Path(__file__).parent


class ConfigurationError(Exception):
    """Raised when configuration loading or access fails."""

    pass


def _load_yaml_file(filename: str) -> Dict[str, Any]:
    """
    Load a YAML configuration file.

    Args:
        filename: Name of YAML file in config directory

    Returns:
        Parsed YAML content as dictionary

    Raises:
        ConfigurationError: If file cannot be loaded
    """
    filepath = CONFIG_DIR / filename
    if not filepath.exists():
        raise ConfigurationError(f"Configuration file not found: {filepath}")

    try:
        with open(filepath, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Error parsing {filename}: {e}")
    except IOError as e:
        raise ConfigurationError(f"Error reading {filename}: {e}")


@lru_cache(maxsize=1)
def load_directory_config() -> Dict[str, Any]:
    """Load directory.yaml configuration."""
    try:
        return _load_yaml_file("directory.yaml")
    except ConfigurationError:
        # Minimal fallback: no seed categories, every optional feature off
        return {
            "categories": [],
            "popular_tags": [],
            "location_suggestions": [],
            "sort_options": [
                {"value": "name", "label": "Name"},
                {"value": "rating", "label": "Highest Rated"},
                {"value": "newest", "label": "Newest"},
                {"value": "popular", "label": "Most Popular"},
            ],
            "feature_flags": {},
        }


def clear_config_cache() -> None:
    """Clear all cached configuration data."""
    load_directory_config.cache_clear()


@dataclass
class CategorySeed:
    """A category defined in the catalogue configuration."""

    id: str
    name: str
    slug: str
    description: str = ""
    icon: str = ""


def get_seed_categories() -> List[CategorySeed]:
    """Get categories to seed into a fresh database."""
    return [
        CategorySeed(
            id=str(item["id"]),
            name=item["name"],
            slug=item["slug"],
            description=item.get("description", ""),
            icon=item.get("icon", ""),
        )
        for item in load_directory_config().get("categories", [])
    ]


def get_popular_tags() -> List[str]:
    """Get tags offered as quick filters."""
    return list(load_directory_config().get("popular_tags", []))


def get_location_suggestions() -> List[str]:
    """Get locations offered as quick filters."""
    return list(load_directory_config().get("location_suggestions", []))


def get_sort_options() -> List[Dict[str, str]]:
    """Get sort options in display order."""
    return list(load_directory_config().get("sort_options", []))


def get_default_feature_flags() -> Dict[str, bool]:
    """Get default enabled state for each feature flag."""
    flags = load_directory_config().get("feature_flags", {}) or {}
    return {str(k): bool(v) for k, v in flags.items()}
