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
import os
import tempfile
from io import StringIO
from unittest import TestCase, main

from simplejson import loads

from omcidecode.main import Main, hex2raw, iter_frames, load_config, \
    parse_args


get_request_hex = ('0001490a00020000' + '8000' + '00' * 30 +
                   '0000002882c8dc0c')

alarm_hex = '0002100a01070000' + '00' * 5 + '10' + '00' * 25 + '07'


class TestArguments(TestCase):

    def test_hex_frames(self):
        args = parse_args([get_request_hex, alarm_hex])
        self.assertEqual(args.frames, [get_request_hex, alarm_hex])
        self.assertEqual(args.output, 'text')
        self.assertIsNone(args.device_id)

    def test_device_id(self):
        self.assertEqual(parse_args(['-D', '0x0b', alarm_hex]).device_id, 11)
        self.assertEqual(parse_args(['-D', '10', alarm_hex]).device_id, 10)

    def test_output_choices(self):
        self.assertEqual(parse_args(['-o', 'json', alarm_hex]).output, 'json')
        self.assertRaises(SystemExit, parse_args, ['-o', 'xml', alarm_hex])

    def test_frames_required(self):
        self.assertRaises(SystemExit, parse_args, [])

    def test_load_logconfig(self):
        config = load_config(parse_args([alarm_hex]), 'logconfig')
        self.assertEqual(config['version'], 1)
        self.assertIn('console', config['handlers'])

    def test_hex2raw(self):
        self.assertEqual(hex2raw('00 01\n49 0a'), b'\x00\x01\x49\x0a')
        self.assertEqual(hex2raw('0x0a0B'), b'\x0a\x0b')

    def test_iter_frames_from_stdin(self):
        args = parse_args(['-f', '-', alarm_hex])
        frames = list(iter_frames(args, StringIO(
            get_request_hex + '\n\n' + alarm_hex + '\n')))
        self.assertEqual([f.strip() for f in frames],
                         [alarm_hex, get_request_hex, alarm_hex])


class TestMain(TestCase):

    def run_main(self, argv, stdin=None):
        out = StringIO()
        status = Main(parse_args(argv), out=out).run(stdin)
        return status, out.getvalue()

    def test_text_output(self):
        status, output = self.run_main([get_request_hex, alarm_hex])
        self.assertEqual(status, 0)
        lines = output.splitlines()
        self.assertEqual(lines[0], 'OLT> Get'.ljust(30) + ' - ONU Data')
        self.assertIn('Alarm'.ljust(30) + ' - ANI-G', lines)
        self.assertIn('            Alarm number 43 is set', lines)
        self.assertIn('        CRC32: 0x82c8dc0c', lines)

    def test_json_output(self):
        status, output = self.run_main(['-o', 'json', get_request_hex])
        self.assertEqual(status, 0)
        data = loads(output)
        self.assertEqual(data['frame'], 1)
        self.assertEqual(data['attributes'][0]['name'], 'MIB Data Sync')

    def test_failures_do_not_stop_processing(self):
        status, output = self.run_main(['0001490a', 'zz', alarm_hex])
        self.assertEqual(status, 1)
        lines = output.splitlines()
        self.assertTrue(lines[0].startswith('Frame 1: OMCI header requires'))
        self.assertTrue(lines[2].startswith('Frame 2: '))
        self.assertIn('Alarm'.ljust(30) + ' - ANI-G', lines)

    def test_truncated_trailer_is_not_a_failure(self):
        status, output = self.run_main(['-o', 'json', get_request_hex[:94]])
        self.assertEqual(status, 0)
        data = loads(output)
        self.assertEqual([d['kind'] for d in data['diagnostics']],
                         ['truncated-trailer'])
        self.assertEqual(data['attributes'][0]['name'], 'MIB Data Sync')

    def test_json_failure(self):
        status, output = self.run_main(['-o', 'json', '0001490a'])
        self.assertEqual(status, 1)
        self.assertEqual(loads(output)['frame'], 1)

    def test_frames_from_file(self):
        fd, path = tempfile.mkstemp(suffix='.txt')
        try:
            with os.fdopen(fd, 'w') as f:
                f.write(get_request_hex + '\n' + alarm_hex + '\n')
            status, output = self.run_main(['-f', path])
        finally:
            os.remove(path)
        self.assertEqual(status, 0)
        self.assertEqual(output.count(' - '), 2)


if __name__ == '__main__':
    main()
