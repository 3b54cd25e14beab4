"""GUI-agnostic core of html_tailwind: models, grammar, converter, services."""
