#!/usr/bin/env python
#
# Copyright 2017 the original author or authors.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#

"""OMCI frame decoder command line entry point"""

import argparse
import os
import sys
from binascii import unhexlify, Error as HexError

import yaml
from simplejson import dumps

from common.structlog_setup import setup_logging
from omcidecode.omci.omci_decoder import OmciDecoder
from omcidecode.omci.omci_defs import OmciDecodeError


defs = dict(
    logconfig=os.environ.get('LOGCONFIG', './logconfig.yml'),
    output=os.environ.get('OMCI_OUTPUT', 'text'),
)


def parse_args(argv=None):

    parser = argparse.ArgumentParser(
        description='Decode OMCI (ITU-T G.988) frames given as hex text')

    _help = ('OMCI frame as hex text, white space is ignored. Several frames '
             'may be given')
    parser.add_argument('frames',
                        metavar='HEX',
                        nargs='*',
                        help=_help)

    _help = ('read one hex frame per line from this file, "-" reads from '
             'stdin')
    parser.add_argument('-f', '--file',
                        dest='file',
                        action='store',
                        default=None,
                        help=_help)

    _help = 'output format (default: %s)' % defs['output']
    parser.add_argument('-o', '--output',
                        dest='output',
                        action='store',
                        default=defs['output'],
                        choices=['text', 'json'],
                        help=_help)

    _help = ('device identifier used to pick the Test request layout, 0x0a '
             'for G-PON or 0x0b for XG-PON (default: taken from each frame)')
    parser.add_argument('-D', '--device-id',
                        dest='device_id',
                        action='store',
                        default=None,
                        type=lambda value: int(value, 0),
                        help=_help)

    _help = ('Path to logconfig.yml config file (default: %s). '
             'If relative, it is relative to the omcidecode package '
             'directory.' % defs['logconfig'])
    parser.add_argument('-l', '--logconfig',
                        dest='logconfig',
                        action='store',
                        default=defs['logconfig'],
                        help=_help)

    _help = "suppress warning logs"
    parser.add_argument('-q', '--quiet',
                        dest='quiet',
                        action='count',
                        help=_help)

    _help = 'enable verbose logging'
    parser.add_argument('-v', '--verbose',
                        dest='verbose',
                        action='count',
                        help=_help)

    args = parser.parse_args(argv)

    # post-processing

    if not args.frames and args.file is None:
        parser.error('no frames given, pass HEX arguments or -f FILE')

    return args


def load_config(args, configname='logconfig'):
    argdict = vars(args)
    path = argdict[configname]
    if path.startswith('.'):
        dir = os.path.dirname(os.path.abspath(__file__))
        path = os.path.join(dir, path)
    path = os.path.abspath(path)
    with open(path) as fd:
        config = yaml.safe_load(fd)
    return config


def hex2raw(hex_string):
    """Frame octets from hex text, white space and a 0x prefix are ignored"""
    hex_string = ''.join(hex_string.split())
    if hex_string[:2].lower() == '0x':
        hex_string = hex_string[2:]
    return unhexlify(hex_string)


def iter_frames(args, stdin=None):
    for frame in args.frames:
        yield frame

    if args.file is None:
        return

    if args.file == '-':
        lines = (stdin or sys.stdin).readlines()
    else:
        with open(args.file) as fd:
            lines = fd.readlines()

    for line in lines:
        if line.strip():
            yield line


class Main(object):

    def __init__(self, args, out=None):
        self.args = args
        self.out = out or sys.stdout
        self.logconfig = load_config(args, 'logconfig')

        verbosity_adjust = (args.verbose or 0) - (args.quiet or 0)
        self.log = setup_logging(self.logconfig,
                                 verbosity_adjust=verbosity_adjust,
                                 cache_on_use=True)
        self.decoder = OmciDecoder()

    def run(self, stdin=None):
        """
        Decode every frame given on the command line
        :return: exit status, 1 if any frame could not be decoded
        """
        failures = 0
        for number, text in enumerate(iter_frames(self.args, stdin), 1):
            try:
                result = self.decoder.decode(hex2raw(text),
                                             device_id=self.args.device_id)

            except (HexError, OmciDecodeError) as e:
                failures += 1
                self.log.error('frame-decode-failed', frame=number, e=e)
                self.report_failure(number, e)
                continue

            for diagnostic in result.diagnostics:
                self.log.warning('frame-diagnostic', frame=number,
                                 kind=diagnostic.kind.value,
                                 message=diagnostic.message)
            self.report(number, result)

        self.log.debug('decode-complete', failures=failures)
        return 1 if failures else 0

    def report(self, number, result):
        if self.args.output == 'json':
            data = result.to_dict()
            data['frame'] = number
            print(dumps(data, indent=2), file=self.out)
        else:
            print(str(result), file=self.out)
            print('', file=self.out)

    def report_failure(self, number, e):
        if self.args.output == 'json':
            print(dumps({'frame': number, 'error': str(e)}, indent=2),
                  file=self.out)
        else:
            print('Frame {}: {}'.format(number, e), file=self.out)
            print('', file=self.out)


def main():
    args = parse_args()
    sys.exit(Main(args).run())


if __name__ == '__main__':
    main()
