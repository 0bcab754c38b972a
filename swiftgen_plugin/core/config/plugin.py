"""
Plugin constants: the fixed conventions shared with the host and generator.

Changing any of these changes the contract with the build host, so
they live in one place.
"""

from __future__ import annotations

# Configuration file searched at the project root and in each target directory
CONFIG_FILE_NAME = "swiftgen.yml"

# Executable resolved through the host's tool lookup
GENERATOR_TOOL_NAME = "swiftgen"

PLUGIN_NAME = "SwiftGenPlugin"
DISPLAY_NAME = "SwiftGen BuildTool Plugin"

# ── Generator invocation ────────────────────────────────────────

GENERATOR_SUBCOMMAND = ("config", "run", "--verbose")
CONFIG_FLAG = "--config"

# ── Environment handed to the generator ─────────────────────────

ENV_PROJECT_DIR = "PROJECT_DIR"
ENV_TARGET_NAME = "TARGET_NAME"
ENV_PRODUCT_MODULE_NAME = "PRODUCT_MODULE_NAME"
ENV_DERIVED_SOURCES_DIR = "DERIVED_SOURCES_DIR"

# Prefix for per-tool path overrides, e.g. SWIFTGEN_PLUGIN_TOOL_SWIFTGEN
TOOL_ENV_PREFIX = "SWIFTGEN_PLUGIN_TOOL_"
