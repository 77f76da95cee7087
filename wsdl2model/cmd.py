#!/usr/bin/env python3
"Print the service description model of a WSDL as JSON"

import argparse
import json
import logging
import sys

from wsdl2model.config import get_settings
from wsdl2model.errors import Wsdl2ModelError
from wsdl2model.model import SoapVersion
from wsdl2model.wsdl import parse_from_url

LOGGER = logging.getLogger()
LOG_FORMAT = "%(asctime)s [%(process)d] [%(levelname)s] [%(name)s] %(message)s"


class ArgumentParser(argparse.ArgumentParser):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.add_arguments()

    def add_arguments(self):
        settings = get_settings()
        self.add_argument("url", type=str, help="location of the WSDL")
        self.add_argument(
            "--log-level",
            type=str,
            default=settings.log_level,
            help="log level")
        self.add_argument(
            "--soap-version",
            choices=[v.value for v in SoapVersion],
            default=settings.soap_version.value,
            help="SOAP binding version to read")

    def parse_args(self, *args, **kwargs):
        options = super().parse_args(*args, **kwargs)
        options.log_level = options.log_level.upper()
        return options


def main(args=None):
    args = args or sys.argv[1:]
    parser = ArgumentParser()
    options = parser.parse_args(args)
    logging.basicConfig(format=LOG_FORMAT, level=options.log_level)
    try:
        document = parse_from_url(
            options.url, soap_version=options.soap_version)
    except Wsdl2ModelError as e:
        LOGGER.error("%s", e)
        return 1
    print(json.dumps(document.to_dict(), indent=2))
    return 0


if __name__ == "__main__":
    exit(main())
