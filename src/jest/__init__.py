"""Jest configuration synthesis.

The builder merges built-in defaults with a whitelisted subset of the project's `package.json`
overrides and lets locally-developed sibling packages through the transform-ignore rules.
"""
