"""Command-line entry point: option parsing, presets and passphrase output."""

import click

from xkpwgen import __version__

LICENSE = """\
xkpwgen and its bundled wordlists are licensed under either of
the Apache License, Version 2.0 <http://www.apache.org/licenses/LICENSE-2.0> or the MIT license
<http://opensource.org/licenses/MIT>, at your option.
There is NO WARRANTY, to the extent permitted by law."""


class _MutuallyExclusiveOption(click.Option):
    """Click option that is mutually exclusive with another option."""

    def __init__(self, *args, **kwargs):
        self.mutually_exclusive = set(kwargs.pop("mutually_exclusive", []))
        super().__init__(*args, **kwargs)

    def handle_parse_result(self, ctx, opts, args):
        for name in self.mutually_exclusive:
            if name in opts and self.name in opts:
                raise click.UsageError(
                    f"--{self.name} and --{name} are mutually exclusive."
                )
        return super().handle_parse_result(ctx, opts, args)


def _print_version(ctx, param, value):
    """Print version, bundled wordlist statistics and license, then exit."""
    if not value or ctx.resilient_parsing:
        return
    from xkpwgen.wordlist import WordlistStatistics, list_wordlists, load_wordlist

    click.echo(f"xkpwgen {__version__}\n")
    for name in list_wordlists():
        stats = WordlistStatistics.from_words(load_wordlist(name))
        click.echo(f"{name} wordlist: {stats.render()}")
    click.echo(f"\n{LICENSE}")
    ctx.exit()


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--length", "-l", default=None, type=click.IntRange(min=1), help="The number of words in each passphrase.  [default: 4]")
@click.option("--number", "-n", default=None, type=click.IntRange(min=1), help="The number of passphrases to generate at once.  [default: 5]")
@click.option("--separator", "-s", default=None, help="The separator between words in a passphrase.  [default: space]")
@click.option("--wordlist", "-w", default=None, help="Bundled wordlist name (formal, slang) or path to a wordlist file.  [default: formal]")
@click.option("--colour", "--color", "colour", default=None, type=click.Choice(["yes", "no", "auto"]), help="Whether to colour alternate lines.  [default: auto]")
@click.option("--words", "print_words", is_flag=True, default=False, help="Print the active wordlist and exit.")
@click.option("--seed", default=None, type=int, help="Seed the random generator for reproducible output.")
@click.option("--preset", default=None, help="Load defaults from a named preset (e.g. default, long, slang).")
@click.option("--preset-dir", "preset_dirs", multiple=True, type=click.Path(file_okay=False), help="Extra directory to search for presets before the bundled ones. Repeatable.")
@click.option("--list-presets", "show_presets", is_flag=True, default=False, help="List available presets and exit.")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Show debug output.", cls=_MutuallyExclusiveOption, mutually_exclusive=["quiet"])
@click.option("--quiet", "-q", is_flag=True, default=False, help="Suppress all output except errors.", cls=_MutuallyExclusiveOption, mutually_exclusive=["verbose"])
@click.option("--log-file", default=None, type=click.Path(), help="Write log records to file.")
@click.option("--version", is_flag=True, expose_value=False, is_eager=True, callback=_print_version, help="Print version and license information.")
def cli(length, number, separator, wordlist, colour, print_words, seed, preset, preset_dirs, show_presets, verbose, quiet, log_file):
    """Generate XKCD 936 passphrases from a list of common words."""
    import os
    import sys
    from pathlib import Path
    from xkpwgen.config import list_presets, resolve_options
    from xkpwgen.errors import InvalidInput, ResourceLoadFailure
    from xkpwgen.logging_config import setup_logging
    from xkpwgen.sampler import generate_passphrases, make_rng
    from xkpwgen.ui import Console, style_lines
    from xkpwgen.wordlist import load_wordlist

    console = Console(quiet=quiet, verbose=verbose)
    logger = setup_logging(verbose=verbose, quiet=quiet, log_file=log_file)

    search_dirs = []
    for d in preset_dirs:
        if os.path.isdir(d):
            search_dirs.append(Path(d))
        else:
            console.error(f"Preset directory not found, skipping: {d}")
            logger.warning("Preset directory not found: %s", d)

    if show_presets:
        console.info("Available presets (user directories shadow bundled ones):")
        for name in list_presets(search_dirs):
            click.echo(name)
        return

    overrides = {
        "length": length,
        "number": number,
        "separator": separator,
        "wordlist": wordlist,
        "colour": colour,
    }
    # Everything is loaded before the first line is printed
    try:
        options = resolve_options(preset, overrides, search_dirs)
        words = load_wordlist(options["wordlist"])
    except (InvalidInput, ResourceLoadFailure, FileNotFoundError) as e:
        logger.error("%s", e)
        raise click.ClickException(str(e))
    console.debug(f"Using wordlist '{options['wordlist']}' with {len(words)} words")

    if print_words:
        for word in words:
            click.echo(word)
        return

    rng = make_rng(seed)
    passphrases = generate_passphrases(
        words,
        options["length"],
        options["number"],
        rng=rng,
        separator=options["separator"],
    )
    colour_mode = options["colour"]
    lines = style_lines(passphrases, colour_mode, sys.stdout.isatty())
    for line in lines:
        click.echo(line, color=True if colour_mode == "yes" else None)
    logger.info("Generated %d passphrase(s)", len(passphrases))


if __name__ == "__main__":
    cli()
