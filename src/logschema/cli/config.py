# logschema/cli/config.py
#!/usr/bin/env python3
from logschema.core.config import LogSchemaConfig


def register(subparsers):
    sp = subparsers.add_parser("config", help="Config utilities")
    sps = sp.add_subparsers(dest="config_cmd")

    def config_default(args, config: LogSchemaConfig) -> int:
        sp.print_help()
        return 1
    sp.set_defaults(func=config_default)

    showp = sps.add_parser("show", help="Show effective config")
    showp.set_defaults(func=show_config)


def show_config(args, config: LogSchemaConfig) -> int:
    print(config.model_dump_json(indent=2))
    return 0
