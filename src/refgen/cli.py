"""CLI interface for the refgen tool."""

import random
import sys
from pathlib import Path

import ruamel.yaml as yaml
from pydantic import ValidationError
from rich.console import Console
from rich.syntax import Syntax
from treeparse import cli, command, option

from .core.charset import charset_from_name
from .core.generator import Generator, NonFeasibleConfig, is_feasible
from .core.models import Config
from .core.pattern import FixedLength, Template
from .file_utils import dump_config, load_config, write_codes
from .utils import describe_capacity


def build_config(
    config=None,
    length=None,
    pattern=None,
    charset=None,
    custom=None,
    count=None,
    prefix=None,
    postfix=None,
) -> Config:
    """Load a config file, if any, and apply command line overrides."""
    if length is not None and pattern is not None:
        raise ValueError("--length and --pattern are mutually exclusive")
    result = load_config(Path(config)) if config else Config()
    if length is not None:
        result = result.with_pattern(FixedLength(length=length))
    if pattern is not None:
        result = result.with_pattern(Template(template=pattern))
    if charset is not None or custom is not None:
        result = result.with_charset(charset_from_name(charset or "custom", custom))
    if count is not None:
        result = result.with_count(count)
    if prefix is not None:
        result = result.with_prefix(prefix)
    if postfix is not None:
        result = result.with_postfix(postfix)
    return result


def generate(
    config, length, pattern, charset, custom, count, prefix, postfix, output, seed
):
    """Generate unique codes and print them or write them to a file."""
    console = Console()
    try:
        print("=" * 20)
        print("Building config...")
        gen_config = build_config(
            config, length, pattern, charset, custom, count, prefix, postfix
        )
        generator = Generator(random.Random(seed))

        with console.status(
            f"[bold green]Generating {gen_config.count} codes...[/bold green]"
        ):
            codes = generator.generate(gen_config)

        print("Generation counts:")
        print(f"  Attempts: {generator.counts['attempts']}")
        print(f"  Accepted: {generator.counts['accepted']}")
        print(f"  Rejected duplicates: {generator.counts['rejected']}")

        if output:
            output_path = Path(output)
            write_codes(codes, output_path)
            print(f"Codes written to {output_path}")
            if output_path.suffix in [".yaml", ".yml"]:
                with open(output_path, "r", encoding="utf-8") as f:
                    console.print(Syntax(f.read(), "yaml"))
        else:
            for code in codes:
                print(code)

        print("=" * 20)

    except NonFeasibleConfig as e:
        print(f"Error: {e}")
        sys.exit(1)
    except FileNotFoundError as e:
        print(f"Error: File not found - {e}")
        sys.exit(1)
    except yaml.YAMLError as e:
        print(f"Error in YAML configuration: {e}")
        sys.exit(1)
    except ValidationError as e:
        print(f"Error in configuration: {e}")
        sys.exit(1)
    except Exception as e:
        print(f"Error: {e}")
        sys.exit(1)


def check(config, length, pattern, charset, custom, count, prefix, postfix):
    """Report how many unique codes a config can hold."""
    try:
        gen_config = build_config(
            config, length, pattern, charset, custom, count, prefix, postfix
        )
        print("=" * 20)
        template = gen_config.pattern.render_template()
        cardinality = gen_config.charset.cardinality()
        wildcards = gen_config.pattern.wildcard_count()
        print(f"Template: {gen_config.prefix}{template}{gen_config.postfix}")
        print(f"Charset: {gen_config.charset.kind} ({cardinality} symbols)")
        print(f"Wildcards: {wildcards}")
        print(f"Capacity: {describe_capacity(cardinality, wildcards)}")
        print(f"Requested: {gen_config.count}")
        print(f"Feasible: {'yes' if is_feasible(gen_config) else 'no'}")
        print("=" * 20)
    except FileNotFoundError as e:
        print(f"Error: File not found - {e}")
        sys.exit(1)
    except yaml.YAMLError as e:
        print(f"Error in YAML configuration: {e}")
        sys.exit(1)
    except Exception as e:
        print(f"Error: {e}")
        sys.exit(1)


def init(config):
    """Write a default config file."""
    try:
        yaml_str = dump_config(Config())
        with open(config, "w", encoding="utf-8") as f:
            f.write(yaml_str)
        print(f"Config written to {config}")
        Console().print(Syntax(yaml_str, "yaml"))
    except FileNotFoundError as e:
        print(f"Error: File not found - {e}")
        sys.exit(1)
    except Exception as e:
        print(f"Error: {e}")
        sys.exit(1)


def config_options():
    """Options shared by the generate and check commands."""
    return [
        option(
            flags=["--config", "-c"],
            arg_type=str,
            default=None,
            help="YAML config file",
            sort_key=0,
        ),
        option(
            flags=["--length", "-n"],
            arg_type=int,
            default=None,
            help="Code length (all positions random)",
            sort_key=1,
        ),
        option(
            flags=["--pattern", "-p"],
            arg_type=str,
            default=None,
            help="Template where '#' marks a random position, e.g. 'REF-####'",
            sort_key=2,
        ),
        option(
            flags=["--charset", "-s"],
            arg_type=str,
            default=None,
            help="Charset: numeric, alphabetic, alphanumeric or custom",
            sort_key=3,
        ),
        option(
            flags=["--custom"],
            arg_type=str,
            default=None,
            help="Characters of a custom charset",
            sort_key=4,
        ),
        option(
            flags=["--count", "-k"],
            arg_type=int,
            default=None,
            help="Number of unique codes",
            sort_key=5,
        ),
        option(
            flags=["--prefix"],
            arg_type=str,
            default=None,
            help="Literal text before every code",
            sort_key=6,
        ),
        option(
            flags=["--postfix"],
            arg_type=str,
            default=None,
            help="Literal text after every code",
            sort_key=7,
        ),
    ]


app = cli(
    name="refgen",
    help="refgen - Generate unique pattern-constrained codes such as referral or voucher codes.",
    max_width=120,
    show_types=True,
    show_defaults=True,
    line_connect=True,
    theme="monochrome",
)

generate_cmd = command(
    name="generate",
    help="Generate unique codes and print them or write them to a .txt, .yaml or .csv file.",
    callback=generate,
    options=config_options()
    + [
        option(
            flags=["--output", "-o"],
            arg_type=str,
            default=None,
            help="Output file path",
            sort_key=8,
        ),
        option(
            flags=["--seed"],
            arg_type=int,
            default=None,
            help="Seed for reproducible output",
            sort_key=9,
        ),
    ],
)
app.commands.append(generate_cmd)

check_cmd = command(
    name="check",
    help="Show the capacity of a config and whether the requested count fits.",
    callback=check,
    options=config_options(),
)
app.commands.append(check_cmd)

init_cmd = command(
    name="init",
    help="Write a default YAML config file.",
    callback=init,
    options=[
        option(
            flags=["--config", "-c"],
            arg_type=str,
            default="refgen.yaml",
            help="Output YAML config file",
            sort_key=0,
        ),
    ],
)
app.commands.append(init_cmd)


def main():
    app.run()


if __name__ == "__main__":
    main()
