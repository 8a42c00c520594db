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
from binascii import hexlify

from bitstring import BitArray

from omcidecode.omci.decode_tree import DecodeField
from omcidecode.omci.omci_defs import OmciAlarmBitmapSize

AlarmPaddingSize = 3
AlarmSequenceNumberOffset = OmciAlarmBitmapSize + AlarmPaddingSize

AllAlarmsCleared = 'All alarms cleared'


def alarms_from_bitmap(bitmap):
    """
    Alarm numbers set in an alarm bitmap

    Bit 0 of the bitmap is the most significant bit of the first octet,
    so the bit at octet i, bit j (MSB first) is alarm number i * 8 + j.

    :param bitmap: (bytes) 28 octet alarm bitmap
    :return: (list) alarm numbers in ascending order
    """
    bitmap = hexlify(bytes(bitmap[:OmciAlarmBitmapSize])).decode('ascii')
    bits = BitArray(hex=bitmap)
    return list(bits.findall('0b1'))


def alarm_name(entity_class, alarm_number):
    return entity_class.alarms.get(alarm_number)


def decode_alarm_notification(content, entity_class, content_offset=0):
    """
    Decode the content of an Alarm notification

    :param content: (bytes) 32 octet message content
    :param entity_class: (EntityClass) reporting class, names known alarms
    :param content_offset: (int) frame offset of the content region
    :return: (DecodeField) alarms, padding and sequence number
    """
    alarms = DecodeField('Alarms', offset=content_offset,
                         length=OmciAlarmBitmapSize,
                         raw=content[:OmciAlarmBitmapSize])
    numbers = alarms_from_bitmap(content)
    for number in numbers:
        octet = number // 8
        label = 'Alarm number {} is set'.format(number)
        name = alarm_name(entity_class, number)
        if name is not None:
            label += ' ({})'.format(name)
        alarms.add(label, offset=content_offset + octet, length=1,
                   raw=content[octet:octet + 1], value=number)

    if not numbers:
        alarms.add(AllAlarmsCleared)

    alarms.add('Padding', offset=content_offset + OmciAlarmBitmapSize,
               length=AlarmPaddingSize,
               raw=content[OmciAlarmBitmapSize:AlarmSequenceNumberOffset])

    sequence = content[AlarmSequenceNumberOffset:AlarmSequenceNumberOffset + 1]
    alarms.add('Sequence number: 0x{:02x}'.format(sequence[0]),
               offset=content_offset + AlarmSequenceNumberOffset, length=1,
               raw=sequence, value=sequence[0])
    return alarms
