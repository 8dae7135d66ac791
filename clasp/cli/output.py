"""CLI output utilities and formatting."""

from colorama import Fore, Style

# ASCII art banner for Clasp CLI
BANNER = f"""
{Fore.YELLOW}╔════════════════════════════════════════════════╗{Style.RESET_ALL}
{Fore.YELLOW}║{Style.RESET_ALL}   {Fore.CYAN}{Style.BRIGHT}{'clasp':<45}{Style.RESET_ALL}{Fore.YELLOW}║{Style.RESET_ALL}
{Fore.YELLOW}║{Style.RESET_ALL}   {Fore.WHITE}{Style.BRIGHT}{'Content-addressed version control':<45}{Style.RESET_ALL}{Fore.YELLOW}║{Style.RESET_ALL}
{Fore.YELLOW}╚════════════════════════════════════════════════╝{Style.RESET_ALL}
"""


def success(message: str) -> str:
    """Format success message in green."""
    return f"{Fore.GREEN}✓ {message}{Style.RESET_ALL}"


def info(message: str) -> str:
    """Format info message in cyan."""
    return f"{Fore.CYAN}→ {message}{Style.RESET_ALL}"


def warning(message: str) -> str:
    """Format warning message in yellow."""
    return f"{Fore.YELLOW}⚠ {message}{Style.RESET_ALL}"


def error(message: str) -> str:
    """Format error message in red."""
    return f"{Fore.RED}✗ {message}{Style.RESET_ALL}"


def render_tree(text: str, indent: str = '  ') -> str:
    """
    Draw connector art for an indented outline.

    Each non-blank line is a node; its leading indentation, in units of
    indent, gives its depth. Top-level nodes are printed bare.

    Example:
        c3              c3
          c2     ->     └── c2
            c1              └── c1
    """
    nodes = []
    for line in text.splitlines():
        if not line.strip():
            continue
        label = line.lstrip(' ')
        nodes.append(((len(line) - len(label)) // len(indent), label))

    lines = []
    # open_levels[k] is True while depth k + 1 still has siblings to come
    open_levels = []

    for i, (depth, label) in enumerate(nodes):
        if depth == 0:
            open_levels = []
            lines.append(label)
            continue

        is_last = True
        for later_depth, _ in nodes[i + 1:]:
            if later_depth < depth:
                break
            if later_depth == depth:
                is_last = False
                break

        del open_levels[depth - 1:]
        prefix = ''.join('│   ' if more else '    ' for more in open_levels)
        lines.append(f"{prefix}{'└── ' if is_last else '├── '}{label}")
        open_levels.append(not is_last)

    return '\n'.join(lines)
