#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path
from typing import Optional

from fpds.config.loader import ConfigLoader
from fpds.config.validation import ConfigValidator, ValidationError


def validate_settings(config_dir: Optional[Path] = None) -> list[ValidationError]:
    """Validate the merged defaults + settings.yaml configuration."""
    loader = ConfigLoader.create(config_dir)
    config = loader.merge_config()
    return ConfigValidator.validate_config(config)


def main() -> None:
    """Main validation function."""
    config_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    print("🔍 Validating fpds configuration...")

    try:
        errors = validate_settings(config_dir)
    except Exception as e:
        print(f"❌ Error loading configuration: {e}")
        sys.exit(1)

    if errors:
        print(f"❌ Found {len(errors)} validation errors:")
        for error in errors:
            print(f"  • {error.field}: {error.message} (value: {error.value})")
        sys.exit(1)

    print("\n🎉 Configuration validation passed!")


if __name__ == "__main__":
    main()
