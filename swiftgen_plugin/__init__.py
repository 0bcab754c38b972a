"""SwiftGen build-tool plugin: plan pre-build generator commands per target."""

__version__ = "0.1.0"
