import argparse
import sys
import toml

from loguru import logger

from meanderx.core import design_channel
from meanderx.config import MeanderConfig
from meanderx.params import StreamParams


def setup_logging(enable_logging, log_file):
    if enable_logging:
        logger.enable("meanderx")
        if log_file:
            logger.remove()

            logger.add(log_file, level="DEBUG")
        else:
            logger.remove()
            logger.add(sys.stderr, level="DEBUG")
        logger.info("logging enabled")


def load_param_file(param_file):
    """
    Read a TOML parameter file

    [stream] holds the StreamParams fields, valley_line as an array of
    {lat, lng} tables. [config] optionally holds the MeanderConfig sections.
    """
    params = toml.load(param_file)
    if "stream" not in params:
        raise ValueError(f"{param_file} has no [stream] table")
    stream = StreamParams.from_dict(params["stream"])
    config = MeanderConfig.from_dict(params.get("config", {}))
    return stream, config


def main(argv=None):
    parser = argparse.ArgumentParser(prog="meanderx")
    parser.add_argument("--param_file", type=str, default=None)
    parser.add_argument("--output", type=str, default=None)
    parser.add_argument("--enable_logging", action="store_true")  # false if not set
    parser.add_argument("--log_file", type=str, default=None)
    args = parser.parse_args(argv)

    setup_logging(args.enable_logging, args.log_file)

    if args.param_file:
        params, config = load_param_file(args.param_file)
    else:
        params, config = StreamParams.default(), MeanderConfig()

    design = design_channel(params, config)

    if args.output:
        with open(args.output, "w") as f:
            f.write(str(design))
    else:
        print(design)
    return design


if __name__ == "__main__":
    main()
