"""Style-guide linter for React, TypeScript, Tailwind and ShadCN code."""

__version__ = "0.1.0"
