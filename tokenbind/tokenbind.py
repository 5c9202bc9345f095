"""
tokenbind main module.

Entry point of the `tokenbind` console script: bind parameter specs against
raw tokens from the command line and show the resolved values.

Examples:
    Bind a count and a greedy message:
        $ tokenbind bind -p count:int -p text:str... -- 3 hello world

    Use a default when input runs out:
        $ tokenbind bind -p amount:long=10 --

    List the type names parameter specs may use:
        $ tokenbind types

Environment:
    TKB_BEQUIET=true        suppress debug logging
    TKB_DETAILEDOUTPUT=true show the full error record on failure
    TKB_REJECTLEFTOVER=true fail when tokens are left unconsumed
"""

from tokenbind.commands.app import cli


def main() -> None:
    """Main entry point for the console script."""
    cli(prog_name="tokenbind")


if __name__ == "__main__":
    main()
