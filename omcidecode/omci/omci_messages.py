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

import structlog
from bitstring import BitArray

from omcidecode.omci.omci_defs import OmciContentSize, OmciAttributeMaskSize


log = structlog.get_logger()


class DecodedAttribute(object):
    """
    One attribute value sliced out of the message content

    :param index: (int) 1-based attribute index within the entity class
    :param name: (str) attribute name
    :param raw: (bytes) attribute octets, clipped at the content boundary
    :param offset: (int) octet offset of the attribute within the content
    :param length: (int) declared attribute length
    """
    def __init__(self, index, name, raw, offset, length):
        self.index = index
        self.name = name
        self.raw = raw
        self.offset = offset
        self.length = length

    def __repr__(self):
        return 'DecodedAttribute({}, {!r}, offset={}, length={})'.format(
            self.index, self.name, self.offset, self.length)

    @property
    def truncated(self):
        return self.offset + self.length > OmciContentSize

    def to_dict(self):
        return {
            'index': self.index,
            'name': self.name,
            'value': hexlify(self.raw).decode('ascii'),
            'offset': self.offset,
            'length': self.length,
            'truncated': self.truncated
        }


def attribute_mask_bits(mask):
    """Binary rendering of an attribute mask, attribute 1 first"""
    return BitArray(uint=mask, length=8 * OmciAttributeMaskSize).bin


def _slice_attributes(content, indexed_attributes, base_offset):
    decoded = []
    offset = base_offset
    for index, attr in indexed_attributes:
        raw = content[offset:min(offset + attr.length, OmciContentSize)]
        row = DecodedAttribute(index, attr.name, raw, offset, attr.length)
        if row.truncated:
            log.debug('attribute-overrun', attribute_index=index,
                      attribute=attr.name, offset=offset, length=attr.length)
        decoded.append(row)
        offset += attr.length
    return decoded


def decode_masked_attributes(content, entity_class, mask, base_offset):
    """
    Enumerate the attributes selected by an attribute mask

    Mask bits are numbered from the most significant one, which selects
    attribute 1. Attributes are packed back to back from base_offset in
    attribute index order. Mask bits past the last attribute of the class
    select nothing and occupy no content.

    :param content: (bytes) 32 octet message content
    :param entity_class: (EntityClass) class whose attributes are selected
    :param mask: (int) 16-bit attribute mask
    :param base_offset: (int) content offset of the first attribute value
    :return: (list) DecodedAttribute per selected attribute
    """
    indexed = []
    for index in entity_class.attribute_indices_from_mask(mask):
        if index > len(entity_class.attributes):
            log.debug('attribute-index-beyond-class', attribute_index=index,
                      entity_class=entity_class.class_id)
            continue
        indexed.append((index, entity_class.attribute(index)))
    return _slice_attributes(content, indexed, base_offset)


def decode_create_attributes(content, entity_class):
    """
    Enumerate the set-by-create attributes of a Create request. There is
    no mask, every set-by-create attribute is present starting at offset 0.
    """
    return _slice_attributes(content,
                             entity_class.set_by_create_attributes(), 0)


def encode_masked_attributes(entity_class, values):
    """
    Pack attribute values the way a Get response or Set request carries them

    :param entity_class: (EntityClass) class the values belong to
    :param values: (dict) attribute name -> (bytes) value of the declared
                   length
    :return: (int, bytes) attribute mask and packed attribute data
    """
    mask = entity_class.mask_for(*values.keys())
    data = b''
    for index in entity_class.attribute_indices_from_mask(mask):
        attr = entity_class.attribute(index)
        value = values[attr.name]
        if len(value) != attr.length:
            raise ValueError('{} requires {} octets, got {}'.format(
                attr.name, attr.length, len(value)))
        data += value
    return mask, data
