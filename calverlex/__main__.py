#!/usr/bin/env python
import click
import click_log

from calverlex.tags.commands import tag as tag_cli  # tag commands
from calverlex.tags.commands import package_logger as logger
from calverlex import __version__

# dict() -> new empty dictionary
CONTEXT_SETTINGS = dict(help_option_names=["--help", "-h"])  # help options


# invoke_without_command=True -> forces the application not to show aids before losing them with a --h
@click.group(context_settings=CONTEXT_SETTINGS, invoke_without_command=True)
@click_log.simple_verbosity_option(logger)
@click.version_option(version=__version__, prog_name="calverlex")
def main():
    """
    Command line interface to `calverlex`, unbounded CalVer tags like 25216a.
    """
    logger.debug("Existing sub-commands need to be used with calverlex.")


main.add_command(tag_cli)  # add tag commands


if __name__ == "__main__":
    main()
