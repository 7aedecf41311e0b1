# scripts/gen_params.py
import argparse

from srpconfig.common.logging_util import level_from_name, setup_logger
from srpconfig.common.protocol import ParamsMessage
from srpconfig.common.settings import Settings
from srpconfig.configuration import load_configuration
from srpconfig.storage.params import default_params_path, save_params


def parse_args(argv=None):
    settings = Settings.from_env()
    parser = argparse.ArgumentParser(description="Write validated SRP group parameters")
    parser.add_argument("--group", default=settings.group, help="Named group (SRP_GROUP)")
    parser.add_argument("--digest", default=settings.digest, help="Digest name (SRP_DIGEST)")
    parser.add_argument("--out", default=None, help="Output path (default: PARAMS_DIR/<group>.json)")
    parser.add_argument("--log-level", default=settings.log_level)
    return parser.parse_args(argv)


def main(argv=None) -> str:
    args = parse_args(argv)
    logger = setup_logger("srpconfig", level_from_name(args.log_level))

    settings = Settings(group=args.group, digest=args.digest, log_level=args.log_level)
    logger.info("Generating parameters for %s / %s", settings.group, settings.digest)

    config = load_configuration(settings)
    message = ParamsMessage.from_configuration(config, settings.digest)

    out = args.out or default_params_path(settings.group)
    save_params(message, out)
    logger.info("Parameters written to %s", out)
    return out


if __name__ == "__main__":
    main()
