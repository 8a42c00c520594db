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
"""
Test request and Test Result message content. Only the ANI-G optical line
supervision test has a defined layout.
"""
import struct

import structlog

from omcidecode.omci.decode_tree import DecodeField, OmciDiagnostic
from omcidecode.omci.omci_defs import DiagnosticType, OmciBaselineDeviceId, \
    OmciExtendedDeviceId, lookup_test_id
from omcidecode.omci.omci_entities import AniG


log = structlog.get_logger()


class TestResultSlot(object):
    """
    One tagged measurement of an optical line supervision test report: a
    tag octet followed by a signed 16-bit value.
    """
    __test__ = False

    def __init__(self, offset, tag, label, units, convert,
                 zero_not_supported=False):
        self.offset = offset
        self.tag = tag
        self.label = label
        self.units = units
        self.convert = convert
        self.zero_not_supported = zero_not_supported

    def decode(self, content, content_offset=0):
        tag = content[self.offset]
        raw = content[self.offset + 1:self.offset + 3]

        if tag != self.tag:
            log.debug('unexpected-test-result-tag', offset=self.offset,
                      expected=self.tag, tag=tag)
            message = 'Unexpected 0x{:02x} test at this location'.format(tag)
            return DecodeField(
                message, offset=content_offset + self.offset, length=3,
                raw=content[self.offset:self.offset + 3],
                diagnostic=OmciDiagnostic(DiagnosticType.MalformedTestSlot,
                                          message,
                                          content_offset + self.offset))

        value, = struct.unpack('>h', raw)
        prefix = 'Test {:02d}: '.format(tag)

        if self.zero_not_supported and value == 0:
            return DecodeField(prefix + self.label + ': Not supported',
                               offset=content_offset + self.offset, length=3,
                               raw=content[self.offset:self.offset + 3])

        converted = self.convert(value)
        return DecodeField(
            '{}{} = {:g} {} (0x{:04x})'.format(prefix, self.label, converted,
                                               self.units, value & 0xffff),
            offset=content_offset + self.offset, length=3,
            raw=content[self.offset:self.offset + 3], value=converted)


def _optical_power(raw):
    return raw * 0.002 - 30


optical_line_supervision_slots = [
    TestResultSlot(0, 1, 'Power feed voltage', 'mV', lambda raw: raw * 20),
    TestResultSlot(3, 3, 'Received optical power', 'dBm', _optical_power,
                   zero_not_supported=True),
    TestResultSlot(6, 5, 'Transmitted optical power', 'dBm', _optical_power,
                   zero_not_supported=True),
    TestResultSlot(9, 9, 'Laser bias current', 'uA', lambda raw: raw * 2),
    TestResultSlot(12, 12, 'Temperature', 'deg C', lambda raw: raw / 256.0),
]


def decode_test_result(content, entity_class, content_offset=0):
    """
    Decode the content of a Test Result notification

    Every slot is checked on its own, a slot with an unexpected tag is
    reported and the remaining slots are still decoded.

    :param content: (bytes) 32 octet message content
    :param entity_class: (EntityClass) class the test ran on
    :param content_offset: (int) frame offset of the content region
    :return: (DecodeField) test report
    """
    if entity_class.class_id != AniG.class_id:
        return DecodeField(
            'Test Result for ME Class {} is not implemented!'.format(
                entity_class.name),
            offset=content_offset, length=len(content), raw=content,
            diagnostic=OmciDiagnostic(
                DiagnosticType.UnimplementedShape,
                'No test report layout for {}'.format(entity_class.name),
                content_offset))

    report = DecodeField('Test report', offset=content_offset,
                         length=len(content), raw=content)
    for slot in optical_line_supervision_slots:
        report.append(slot.decode(content, content_offset))
    return report


def _test_to_perform(content, offset, content_offset):
    code = content[offset]
    return DecodeField(
        'Test to perform: {} (0x{:02x})'.format(lookup_test_id(code).value,
                                                code),
        offset=content_offset + offset, length=1,
        raw=content[offset:offset + 1], value=code)


def decode_test_request(content, entity_class, device_id, content_offset=0):
    """
    Decode the content of a Test request

    :param content: (bytes) 32 octet message content
    :param entity_class: (EntityClass) class to be tested
    :param device_id: (int) device identifier, selects the baseline (0x0a)
                      or extended (0x0b) message layout
    :param content_offset: (int) frame offset of the content region
    :return: (list) DecodeField nodes
    """
    if entity_class.class_id == AniG.class_id:
        if device_id == OmciExtendedDeviceId:
            size, = struct.unpack('>H', content[0:2])
            return [
                DecodeField('Size of message content field: 0x{:04x}'.format(
                            size), offset=content_offset, length=2,
                            raw=content[0:2], value=size),
                _test_to_perform(content, 2, content_offset)
            ]

        elif device_id == OmciBaselineDeviceId:
            return [_test_to_perform(content, 0, content_offset)]

    message = 'No test request layout for {} with device identifier ' \
              '0x{:02x}'.format(entity_class.name, device_id)
    return [DecodeField('Test request', offset=content_offset,
                        length=len(content), raw=content,
                        diagnostic=OmciDiagnostic(
                            DiagnosticType.UnimplementedShape, message,
                            content_offset))]
