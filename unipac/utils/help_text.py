"""
Static usage and help text.
"""
from colorama import Fore, Style
from tabulate import tabulate

from unipac.router import FLAG_SPECS, FLAG_TABLE

PROG = 'unipac'

USAGE = f"""Usage: {PROG} <search term>
       {PROG} [option] [package]
Try '{PROG} --help' for the list of options."""

MOO = r"""
         (__)
         (oo)
   /------\/
  / |    ||
 *  /\---/\
    ~~   ~~
..."Have you mooed today?"...
"""


def print_usage():
    print(USAGE)


def flag_usage(flag: str) -> str:
    """Usage hint for a flag that was given without its package name."""
    spec = FLAG_TABLE[flag]
    return f"Usage: {PROG} {flag} <package>\n  {spec.description}"


def print_help():
    """Print every option with its long form and what it does."""
    rows = []
    for spec in FLAG_SPECS:
        arg = '<package>' if spec.needs_name else ''
        rows.append([f"{Fore.YELLOW}{spec.short}{Style.RESET_ALL}", spec.long, arg, spec.description])

    print(f"\n{Fore.CYAN}{'='*60}{Style.RESET_ALL}")
    print(f"{Fore.GREEN}{PROG}: search, install and remove with yay, flatpak and snap{Style.RESET_ALL}")
    print(f"{Fore.CYAN}{'='*60}{Style.RESET_ALL}\n")
    print(f"Usage: {PROG} <search term>")
    print(f"       {PROG} [option] [package]\n")
    print(tabulate(rows, tablefmt='plain'))
    print(f"\n{Fore.CYAN}Examples:{Style.RESET_ALL}")
    print(f"    {PROG} firefox           # Search every source for firefox")
    print(f"    {PROG} -i firefox        # Search, then choose a source to install from")
    print(f"    {PROG} -is spotify       # Install spotify with snap")
    print(f"    {PROG} -u                # Upgrade yay, flatpak and snap packages\n")


def print_header(title: str):
    """Label printed above each backend's output block."""
    print(f"\n{Fore.CYAN}==> {title}{Style.RESET_ALL}")
