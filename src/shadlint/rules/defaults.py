"""Bundled rule definitions.

Each entry is a plain mapping in the same shape a YAML rule file uses,
so the defaults go through exactly the same validation as user rules.
"""

_TS = [".ts", ".tsx", ".mts", ".cts"]
_JSX = [".tsx", ".jsx"]
_SCRIPT = [".ts", ".tsx", ".js", ".jsx", ".mjs", ".cjs", ".mts", ".cts"]

DEFAULT_RULES: list[dict] = [
  {
    "id": "TS001",
    "title": "no-explicit-any",
    "pattern": r":\s*any\b|\bas\s+any\b|<any>|\bany\[\]",
    "severity": "critical",
    "message": "Explicit 'any' disables type checking",
    "suggestion": "Use a precise type, a generic, or 'unknown' with narrowing",
    "extensions": _TS,
  },
  {
    "id": "TS002",
    "title": "no-ts-suppression",
    "pattern": r"//\s*@ts-(?:ignore|nocheck)\b",
    "severity": "critical",
    "message": "TypeScript error suppressed with a compiler directive",
    "suggestion": "Fix the type error, or use @ts-expect-error with a reason",
    "extensions": _TS,
  },
  {
    "id": "TS003",
    "title": "prefer-union-over-enum",
    "pattern": r"^\s*(?:export\s+)?(?:const\s+)?enum\s+\w+",
    "severity": "nice-to-have",
    "message": "Enum declared where a string union would do",
    "suggestion": "Use a union of string literals or an 'as const' object",
    "extensions": _TS,
  },
  {
    "id": "REA001",
    "title": "no-react-fc",
    "pattern": r"\bReact\.(?:FC|FunctionComponent)\b|:\s*FC<",
    "severity": "important",
    "message": "Component typed with React.FC",
    "suggestion": "Type the props parameter directly: function Button(props: ButtonProps)",
    "extensions": _JSX,
  },
  {
    "id": "REA002",
    "title": "no-class-component",
    "pattern": r"\bclass\s+\w+\s+extends\s+(?:React\.)?(?:Pure)?Component\b",
    "severity": "critical",
    "message": "Class component found",
    "suggestion": "Rewrite as a function component with hooks",
    "extensions": _SCRIPT,
  },
  {
    "id": "REA003",
    "title": "no-index-key",
    "pattern": r"\bkey=\{\s*(?:index|idx|i)\s*\}",
    "severity": "important",
    "message": "Array index used as a React key",
    "suggestion": "Use a stable identifier from the item",
    "extensions": _JSX,
  },
  {
    "id": "REA004",
    "title": "no-inline-style",
    "pattern": r"\bstyle=\{\{",
    "severity": "important",
    "message": "Inline style object instead of Tailwind classes",
    "suggestion": "Express the styling with Tailwind utility classes",
    "extensions": _JSX,
  },
  {
    "id": "REA005",
    "title": "prefer-named-export",
    "pattern": r"^\s*export\s+default\b",
    "severity": "nice-to-have",
    "message": "Default export",
    "suggestion": "Use a named export so imports stay consistent",
    "extensions": _SCRIPT,
  },
  {
    "id": "TW001",
    "title": "no-arbitrary-value",
    "pattern": r"(?<![\w-])(?:[a-z]+-)+\[[^\]\s]+\]",
    "severity": "nice-to-have",
    "message": "Tailwind arbitrary value",
    "suggestion": "Use a value from the design scale or extend the theme",
    "extensions": _JSX,
  },
  {
    "id": "TW002",
    "title": "no-css-important",
    "pattern": r"!important\b",
    "severity": "important",
    "message": "CSS !important override",
    "suggestion": "Fix the specificity problem instead of forcing the rule",
    "extensions": [".css"],
  },
  {
    "id": "SHD001",
    "title": "use-ui-wrapper",
    "pattern": r"""from\s+['"]@radix-ui/react-[\w-]+['"]""",
    "severity": "nice-to-have",
    "message": "Radix primitive imported directly",
    "suggestion": "Import the ShadCN wrapper from '@/components/ui' instead",
    "extensions": _JSX,
  },
  {
    "id": "GEN001",
    "title": "no-console-log",
    "pattern": r"\bconsole\.(?:log|debug)\s*\(",
    "severity": "important",
    "message": "Debug console output left in code",
    "suggestion": "Remove it or route through the application logger",
    "extensions": _SCRIPT,
  },
  {
    "id": "GEN002",
    "title": "no-var",
    "pattern": r"(?<![\w.$])var\s+[A-Za-z_$]",
    "severity": "important",
    "message": "'var' declaration",
    "suggestion": "Use 'const', or 'let' when the binding is reassigned",
    "extensions": _SCRIPT,
  },
]
