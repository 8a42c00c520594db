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
from unittest import TestCase, main

from omcidecode.omci.omci_defs import DiagnosticType
from omcidecode.omci.omci_entities import AniG, CircuitPack
from omcidecode.omci.omci_tests import decode_test_request, \
    decode_test_result


def report_content(slots):
    """Test report content from (offset, tag, value) triples"""
    content = bytearray(32)
    for offset, tag, value in slots:
        content[offset] = tag
        content[offset + 1:offset + 3] = (value & 0xffff).to_bytes(2, 'big')
    return bytes(content)


# Power feed 50, Rx power 0x2000, Tx power 0x3a98, bias 100, temperature 0x1900
reference_slots = [(0, 1, 50), (3, 3, 0x2000), (6, 5, 0x3a98), (9, 9, 100),
                   (12, 12, 0x1900)]


class TestOpticalLineSupervisionReport(TestCase):

    def test_reference_report(self):
        node = decode_test_result(report_content(reference_slots), AniG)
        self.assertEqual(node.label, 'Test report')
        self.assertEqual(len(node.children), 5)

        voltage, rx, tx, bias, temperature = node.children
        self.assertEqual(voltage.label,
                         'Test 01: Power feed voltage = 1000 mV (0x0032)')
        self.assertEqual(voltage.value, 1000)
        self.assertAlmostEqual(rx.value, 0x2000 * 0.002 - 30)
        self.assertTrue(rx.label.startswith(
            'Test 03: Received optical power = -13.616 dBm'))
        self.assertAlmostEqual(tx.value, 0x3a98 * 0.002 - 30)
        self.assertEqual(bias.label,
                         'Test 09: Laser bias current = 200 uA (0x0064)')
        self.assertEqual(temperature.label,
                         'Test 12: Temperature = 25 deg C (0x1900)')
        self.assertEqual(node.diagnostics(), [])

    def test_signed_values(self):
        node = decode_test_result(
            report_content([(0, 1, -1), (3, 3, 1), (6, 5, 1), (9, 9, 0),
                            (12, 12, -256)]), AniG)
        self.assertEqual(node.children[0].value, -20)
        self.assertEqual(node.children[0].label,
                         'Test 01: Power feed voltage = -20 mV (0xffff)')
        self.assertEqual(node.children[4].value, -1.0)

    def test_optical_power_not_supported(self):
        node = decode_test_result(
            report_content([(0, 1, 50), (3, 3, 0), (6, 5, 0), (9, 9, 0),
                            (12, 12, 0)]), AniG)
        self.assertEqual(node.children[1].label,
                         'Test 03: Received optical power: Not supported')
        self.assertIsNone(node.children[1].value)
        self.assertEqual(node.children[2].label,
                         'Test 05: Transmitted optical power: Not supported')

    def test_mismatched_tag_only_affects_its_slot(self):
        slots = [(0, 2, 50)] + reference_slots[1:]
        node = decode_test_result(report_content(slots), AniG, 8)

        diagnostics = node.diagnostics()
        self.assertEqual(len(diagnostics), 1)
        self.assertEqual(diagnostics[0].kind, DiagnosticType.MalformedTestSlot)
        self.assertEqual(diagnostics[0].offset, 8)
        self.assertEqual(node.children[0].label,
                         'Unexpected 0x02 test at this location')

        self.assertEqual([child.label[:7] for child in node.children[1:]],
                         ['Test 03', 'Test 05', 'Test 09', 'Test 12'])

    def test_every_slot_mismatched(self):
        node = decode_test_result(bytes(32), AniG)
        self.assertEqual(len(node.diagnostics()), 5)

    def test_other_classes_not_implemented(self):
        node = decode_test_result(report_content(reference_slots), CircuitPack)
        self.assertEqual(node.label,
                         'Test Result for ME Class Circuit Pack is not '
                         'implemented!')
        self.assertEqual(node.children, [])
        self.assertEqual(node.diagnostic.kind,
                         DiagnosticType.UnimplementedShape)


class TestTestRequest(TestCase):

    def test_baseline_layout(self):
        content = b'\x07' + bytes(31)
        fields = decode_test_request(content, AniG, 0x0a, 8)
        self.assertEqual(len(fields), 1)
        self.assertEqual(fields[0].label, 'Test to perform: Self test (0x07)')
        self.assertEqual(fields[0].offset, 8)

    def test_extended_layout(self):
        content = b'\x00\x01\x09' + bytes(29)
        fields = decode_test_request(content, AniG, 0x0b, 8)
        self.assertEqual([f.label for f in fields],
                         ['Size of message content field: 0x0001',
                          'Test to perform: Vendor specific (0x09)'])
        self.assertEqual(fields[1].offset, 10)

    def test_reserved_test(self):
        fields = decode_test_request(b'\x03' + bytes(31), AniG, 0x0a)
        self.assertEqual(fields[0].label,
                         'Test to perform: Reserved for future use (0x03)')

    def test_other_class_or_device(self):
        for entity_class, device_id in [(CircuitPack, 0x0a), (AniG, 0x0c)]:
            fields = decode_test_request(bytes(32), entity_class, device_id)
            self.assertEqual(len(fields), 1)
            self.assertEqual(fields[0].diagnostic.kind,
                             DiagnosticType.UnimplementedShape)

    def test_test_id_range(self):
        # every octet is a valid test identifier
        for code in range(256):
            fields = decode_test_request(bytes([code]) + bytes(31), AniG, 0x0a)
            self.assertEqual(fields[0].value, code)


if __name__ == '__main__':
    main()
