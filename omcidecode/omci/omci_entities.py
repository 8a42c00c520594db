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
import inspect
import sys

from omcidecode.omci.omci_defs import bitpos_from_mask


class EntityClassAttribute(object):

    def __init__(self, name, length, set_by_create=False):
        """
        Initialize an Attribute for a Managed Entity Class

        :param name: (str) Attribute name as reported in decoded output
        :param length: (int) Size of the attribute on the wire, in octets
        :param set_by_create: (boolean) If true, the attribute is carried by
                              a Create request
        """
        self._name = name
        self._length = length
        self._set_by_create = set_by_create

    @property
    def name(self):
        return self._name

    @property
    def length(self):
        return self._length

    @property
    def set_by_create(self):
        return self._set_by_create

    def __repr__(self):
        return 'EntityClassAttribute({!r}, {}, set_by_create={})'.format(
            self._name, self._length, self._set_by_create)


class EntityClassMeta(type):
    """
    Metaclass for EntityClass to generate secondary class attributes
    for class attributes of the derived classes.
    """
    def __init__(cls, name, bases, dct):
        super(EntityClassMeta, cls).__init__(name, bases, dct)

        # initialize attribute_name_to_index_map, attribute indices are
        # 1-based since index 0 is the managed entity id
        cls.attribute_name_to_index_map = dict(
            (a.name, idx + 1) for idx, a in enumerate(cls.attributes))


class EntityClass(object, metaclass=EntityClassMeta):

    class_id = 'to be filled by subclass'
    name = 'to be filled by subclass'
    attributes = []
    alarms = dict()       # Alarm Number -> Alarm Name
    placeholder = False   # If true, class id is not assigned in this registry
                          # and the name comes from the reserved ranges

    # will be map of attr_name -> index in attributes, initialized by metaclass
    attribute_name_to_index_map = None

    byte1_mask_to_attr_indices = dict(
        (m, bitpos_from_mask(m, 8, -1)) for m in range(256))
    byte2_mask_to_attr_indices = dict(
        (m, bitpos_from_mask(m, 16, -1)) for m in range(256))

    @classmethod
    def attribute_indices_from_mask(cls, mask):
        # each bit in the 2-byte field denote an attribute index; we use a
        # lookup table to make lookup a bit faster
        return \
            cls.byte1_mask_to_attr_indices[(mask >> 8) & 0xff] + \
            cls.byte2_mask_to_attr_indices[(mask & 0xff)]

    @classmethod
    def mask_for(cls, *attr_names):
        """
        Return mask value corresponding to given attributes names
        :param attr_names: Attribute names
        :return: integer mask value
        """
        mask = 0
        for attr_name in attr_names:
            index = cls.attribute_name_to_index_map[attr_name]
            mask |= (1 << (16 - index))
        return mask

    @classmethod
    def attribute(cls, index):
        """Attribute definition at a 1-based attribute index"""
        return cls.attributes[index - 1]

    @classmethod
    def set_by_create_attributes(cls):
        """(index, attribute) pairs carried by a Create request, in order"""
        return [(idx + 1, attr) for idx, attr in enumerate(cls.attributes)
                if attr.set_by_create]


# abbreviations
ECA = EntityClassAttribute
SBC = True


class OntData(EntityClass):
    class_id = 2
    name = 'ONU Data'
    attributes = [
        ECA('MIB Data Sync', 1),
    ]


class Cardholder(EntityClass):
    class_id = 5
    name = 'Cardholder'
    attributes = [
        ECA('Actual Plug-in Unit Type', 1),
        ECA('Expected Plug-in Unit Type', 1),
        ECA('Expected Port Count', 1),
        ECA('Expected Equipment Id', 20),
        ECA('Actual Equipment Id', 20),
        ECA('Protection Profile Pointer', 1),
        ECA('Invoke Protection Switch', 1),
    ]
    alarms = {
        0: 'Plug-in circuit pack missing',
        1: 'Plug-in type mismatch alarm',
        2: 'Improper card removal',
        3: 'Plug-in equipment ID mismatch alarm',
        4: 'Protection switch',
    }


class CircuitPack(EntityClass):
    class_id = 6
    name = 'Circuit Pack'
    attributes = [
        ECA('Type', 1, SBC),
        ECA('Number of ports', 1),
        ECA('Serial Number', 8),
        ECA('Version', 14),
        ECA('Vendor Id', 4),
        ECA('Administrative State', 1, SBC),
        ECA('Operational State', 1),
        ECA('Bridged or IP Ind', 1),
        ECA('Equipment Id', 20),
        ECA('Card Configuration', 1, SBC),
        ECA('Total T-CONT Buffer Number', 1),
        ECA('Total Priority Queue Number', 1),
        ECA('Total Traffic Scheduler Number', 1),
        ECA('Power Shed Override', 4),
    ]
    alarms = {
        0: 'Equipment alarm',
        1: 'Powering alarm',
        2: 'Self-test failure',
        3: 'Laser end of life',
        4: 'Temperature yellow',
        5: 'Temperature red',
    }


class SoftwareImage(EntityClass):
    class_id = 7
    name = 'Software Image'
    attributes = [
        ECA('Version', 14),
        ECA('Is committed', 1),
        ECA('Is active', 1),
        ECA('Is valid', 1),
    ]


class PptpEthernetUni(EntityClass):
    class_id = 11
    name = 'Physical path termination point Ethernet UNI'
    attributes = [
        ECA('Expected Type', 1),
        ECA('Sensed Type', 1),
        ECA('Auto Detection Configuration', 1),
        ECA('Ethernet Loopback Configuration', 1),
        ECA('Administrative State', 1),
        ECA('Operational State', 1),
        ECA('Configuration Ind', 1),
        ECA('Max Frame Size', 2),
        ECA('DTE or DCE', 1),
        ECA('Pause Time', 2),
        ECA('Bridged or IP Ind', 1),
        ECA('ARC', 1),
        ECA('ARC Interval', 1),
        ECA('PPPoE Filter', 1),
        ECA('Power Control', 1),
    ]
    alarms = {
        0: 'LAN Loss Of Signal',
    }


class EthernetPMMonitoringHistoryData(EntityClass):
    class_id = 24
    name = 'Ethernet performance monitoring history data'
    attributes = [
        ECA('Interval End Time', 1),
        ECA('Threshold Data 1/2 Id', 2, SBC),
        ECA('FCS errors Drop events', 4),
        ECA('Excessive Collision Counter', 4),
        ECA('Late Collision Counter', 4),
        ECA('Frames too long', 4),
        ECA('Buffer overflows on Receive', 4),
        ECA('Buffer overflows on Transmit', 4),
        ECA('Single Collision Frame Counter', 4),
        ECA('Multiple Collisions Frame Counter', 4),
        ECA('SQE counter', 4),
        ECA('Deferred Transmission Counter', 4),
        ECA('Internal MAC Transmit Error Counter', 4),
        ECA('Carrier Sense Error Counter', 4),
        ECA('Alignment Error Counter', 4),
        ECA('Internal MAC Receive Error Counter', 4),
    ]
    alarms = {
        0: 'FCS errors',
        1: 'Excessive collision counter',
        2: 'Late collision counter',
        3: 'Frames too long',
        4: 'Buffer overflows on receive',
        5: 'Buffer overflows on transmit',
        6: 'Single collision frame counter',
        7: 'Multiple collision frame counter',
        8: 'SQE counter',
        9: 'Deferred transmission counter',
        10: 'Internal MAC transmit error counter',
        11: 'Carrier sense error counter',
        12: 'Alignment error counter',
        13: 'Internal MAC receive error counter',
    }


class VendorSpecific(EntityClass):
    class_id = 44
    name = 'Vendor Specific'
    attributes = [
        ECA('Sub-Entity', 1, SBC),
    ]


class MacBridgeServiceProfile(EntityClass):
    class_id = 45
    name = 'MAC Bridge Service Profile'
    attributes = [
        ECA('Spanning tree ind', 1, SBC),
        ECA('Learning ind', 1, SBC),
        ECA('Port bridging ind', 1, SBC),
        ECA('Priority', 2, SBC),
        ECA('Max age', 2, SBC),
        ECA('Hello time', 2, SBC),
        ECA('Forward delay', 2, SBC),
        ECA('Unknown MAC address discard', 1, SBC),
        ECA('MAC learning depth', 1, SBC),
    ]


class MacBridgePortConfigurationData(EntityClass):
    class_id = 47
    name = 'MAC bridge port configuration data'
    attributes = [
        ECA('Bridge id pointer', 2, SBC),
        ECA('Port num', 1, SBC),
        ECA('TP type', 1, SBC),
        ECA('TP pointer', 2, SBC),
        ECA('Port priority', 2, SBC),
        ECA('Port path cost', 2, SBC),
        ECA('Port spanning tree ind', 1, SBC),
        ECA('Encapsulation method', 1, SBC),
        ECA('LAN FCS ind', 1, SBC),
        ECA('Port MAC address', 6),
        ECA('Outbound TD pointer', 2),
        ECA('Inbound TD pointer', 2),
    ]
    alarms = {
        0: 'Port blocking',
    }


class MacBridgePortDesignationData(EntityClass):
    class_id = 48
    name = 'MAC bridge port designation data'
    attributes = [
        ECA('Designated bridge root cost port', 24),
        ECA('Port state', 1),
    ]


class MacBridgePortFilterTableData(EntityClass):
    class_id = 49
    name = 'MAC bridge port filter table data'
    attributes = [
        ECA('MAC filter table', 8),
    ]


class MacBridgePerformanceMonitoringHistoryData(EntityClass):
    class_id = 51
    name = 'MAC bridge performance monitoring history data'
    attributes = [
        ECA('Interval end time', 1),
        ECA('Threshold data 1/2 id', 2, SBC),
        ECA('Bridge learning entry discard count', 4),
    ]


class MacBridgePortPerformanceMonitoringHistoryData(EntityClass):
    class_id = 52
    name = 'MAC bridge port performance monitoring history data'
    attributes = [
        ECA('Interval end time', 1),
        ECA('Threshold data 1/2 id', 2, SBC),
        ECA('Forwarded frame counter', 4),
        ECA('Delay exceeded discard counter', 4),
        ECA('MTU exceeded discard counter', 4),
        ECA('Received frame counter', 4),
        ECA('Received and discarded counter', 4),
    ]


class MacBridgePortFilterPreAssignTable(EntityClass):
    class_id = 79
    name = 'MAC bridge port filter pre-assign table'
    attributes = [
        ECA('IPv4 multicast filtering', 1),
        ECA('IPv6 multicast filtering', 1),
        ECA('IPv4 broadcast filtering', 1),
        ECA('RARP filtering', 1),
        ECA('IPX filtering', 1),
        ECA('NetBEUI filtering', 1),
        ECA('AppleTalk filtering', 1),
        ECA('Bridge management information filtering', 1),
        ECA('ARP filtering', 1),
    ]


class PptpVideoUni(EntityClass):
    class_id = 82
    name = 'Physical path termination point video UNI'
    attributes = [
        ECA('Administrative State', 1),
        ECA('Operational State', 1),
        ECA('ARC', 1),
        ECA('ARC Interval', 1),
        ECA('Power Control', 1),
    ]


class VlanTaggingFilterData(EntityClass):
    class_id = 84
    name = 'VLAN tagging filter data'
    attributes = [
        ECA('VLAN filter list', 24, SBC),
        ECA('Forward operation', 1, SBC),
        ECA('Number of entries', 1, SBC),
    ]


class EthernetPMMonitoringHistoryData2(EntityClass):
    class_id = 89
    name = 'Ethernet performance monitoring history data 2'
    attributes = [
        ECA('Interval end time', 1),
        ECA('Threshold data 1/2 id', 2, SBC),
        ECA('PPPoE filtered frame counter', 4),
    ]


class PptpVideoAni(EntityClass):
    class_id = 90
    name = 'Physical path termination point video ANI'
    attributes = [
        ECA('Administrative State', 1),
        ECA('Operational State', 1),
        ECA('ARC', 1),
        ECA('ARC Interval', 1),
        ECA('Frequency Range Low', 1),
        ECA('Frequency Range High', 1),
        ECA('Signal Capability', 1),
        ECA('Optical Signal Level', 1),
        ECA('Pilot Signal Level', 1),
        ECA('Signal Level min', 1),
        ECA('Signal Level max', 1),
        ECA('Pilot Frequency', 4),
        ECA('AGC Mode', 1),
        ECA('AGC Setting', 1),
        ECA('Video Lower Optical Threshold', 1),
        ECA('Video Upper Optical Threshold', 1),
    ]


class Ieee8021pMapperServiceProfile(EntityClass):
    class_id = 130
    name = 'IEEE 802.1p mapper service profile'
    attributes = [
        ECA('TP Pointer', 2, SBC),
        ECA('Interwork TP pointer for P-bit priority 0', 2, SBC),
        ECA('Interwork TP pointer for P-bit priority 1', 2, SBC),
        ECA('Interwork TP pointer for P-bit priority 2', 2, SBC),
        ECA('Interwork TP pointer for P-bit priority 3', 2, SBC),
        ECA('Interwork TP pointer for P-bit priority 4', 2, SBC),
        ECA('Interwork TP pointer for P-bit priority 5', 2, SBC),
        ECA('Interwork TP pointer for P-bit priority 6', 2, SBC),
        ECA('Interwork TP pointer for P-bit priority 7', 2, SBC),
        ECA('Unmarked frame option', 1, SBC),
        ECA('DSCP to P-bit mapping', 24),
        ECA('Default P-bit marking', 1, SBC),
        ECA('TP Type', 1, SBC),
    ]


class OltG(EntityClass):
    class_id = 131
    name = 'OLT-G'
    attributes = [
        ECA('OLT vendor id', 4),
        ECA('Equipment id', 20),
        ECA('OLT version', 14),
    ]


class OntPowerShedding(EntityClass):
    class_id = 133
    name = 'ONU Power Shedding'
    attributes = [
        ECA('Restore power timer reset interval', 2),
        ECA('Data class shedding interval', 2),
        ECA('Voice class shedding interval', 2),
        ECA('Video overlay class shedding interval', 2),
        ECA('Video return class shedding interval', 2),
        ECA('DSL class shedding interval', 2),
        ECA('ATM class shedding interval', 2),
        ECA('CES class shedding interval', 2),
        ECA('Frame class shedding interval', 2),
        ECA('SONET class shedding interval', 2),
        ECA('Shedding status', 2),
    ]


class IpHostConfigData(EntityClass):
    class_id = 134
    name = 'IP host config data'
    attributes = [
        ECA('IP options', 1),
        ECA('MAC address', 6),
        ECA('Onu identifier', 25),
        ECA('IP address', 4),
        ECA('Mask', 4),
        ECA('Gateway', 4),
        ECA('Primary DNS', 4),
        ECA('Secondary DNS', 4),
        ECA('Current address', 4),
        ECA('Current Mask', 4),
        ECA('Current Gateway', 4),
        ECA('Current Primary DNS', 4),
        ECA('Current Secondary DNS', 4),
        ECA('Domain name', 25),
        ECA('Host name', 25),
        ECA('Relay agent options', 2),
    ]


class NetworkAddress(EntityClass):
    class_id = 137
    name = 'Network address'
    attributes = [
        ECA('Security pointer', 2, SBC),
        ECA('Address pointer', 2, SBC),
    ]


class CallControlPerformanceMonitoringHistoryData(EntityClass):
    class_id = 140
    name = 'Call control performance monitoring history data'
    attributes = [
        ECA('Interval end time', 1),
        ECA('Threshold data 1 ID', 2, SBC),
    ]


class RtpPerformanceMonitoringHistoryData(EntityClass):
    class_id = 144
    name = 'RTP performance monitoring history data'
    attributes = [
        ECA('Interval end time', 1),
        ECA('Threshold data 1 ID', 2, SBC),
    ]


class LargeString(EntityClass):
    class_id = 157
    name = 'Large string'
    attributes = [
        ECA('Number of parts', 1, SBC),
        ECA('Part 1', 25),
    ]


class OnuRemoteDebug(EntityClass):
    class_id = 158
    name = 'ONU remote debug'
    attributes = [
        ECA('Command format', 1),
        ECA('Command', 25),
        ECA('Reply table', 4),
    ]


class EquipmentProtectionProfile(EntityClass):
    class_id = 159
    name = 'Equipment protection profile'
    attributes = [
        ECA('Protect slot 1, protect slot 2', 2, SBC),
        ECA('Working slot 1..8', 8, SBC),
        ECA('Protect status 1, protect status 2', 2),
        ECA('Revertive ind', 1, SBC),
        ECA('Wait to restore time', 1, SBC),
    ]


class EquipmentExtensionPackage(EntityClass):
    class_id = 160
    name = 'Equipment extension package'
    attributes = [
        ECA('Environmental sense', 2),
        ECA('Contact closure output', 2),
    ]


class ExtendedVlanTaggingOperationConfigurationData(EntityClass):
    class_id = 171
    name = 'Extended VLAN tagging operation configuration data'
    attributes = [
        ECA('Association type', 1, SBC),
        ECA('Received frame VLAN tagging operation table max size', 2),
        ECA('Input TPID', 2),
        ECA('Output TPID', 2),
        ECA('Downstream mode', 1),
        ECA('Received frame VLAN tagging operation table', 16),
        ECA('Associated ME pointer', 2, SBC),
        ECA('DSCP to P-bit mapping', 24),
    ]


class OntG(EntityClass):
    class_id = 256
    name = 'ONU-G'
    attributes = [
        ECA('Vendor Id', 4),
        ECA('Version', 14),
        ECA('Serial Nr', 8),
        ECA('Traffic management option', 1),
        ECA('VP/VC cross connection function option', 1),
        ECA('Battery backup', 1),
        ECA('Administrative State', 1),
        ECA('Operational State', 1),
    ]
    alarms = {
        0: 'Equipment alarm',
        1: 'Powering alarm',
        2: 'Battery missing',
        3: 'Battery failure',
        4: 'Battery low',
        5: 'Physical intrusion',
        6: 'Self-test failure',
        7: 'Dying gasp',
        8: 'Temperature yellow',
        9: 'Temperature red',
        10: 'Voltage yellow',
        11: 'Voltage red',
        12: 'ONU manual power off',
        13: 'Invalid image',
        14: 'PSE overload yellow',
        15: 'PSE overload red',
    }


class Ont2G(EntityClass):
    class_id = 257
    name = 'ONU2-G'
    attributes = [
        ECA('Equipment id', 20),
        ECA('OMCC version', 1),
        ECA('Vendor product code', 2),
        ECA('Security capability', 1),
        ECA('Security mode', 1),
        ECA('Total priority queue number', 2),
        ECA('Total traffic scheduler number', 1),
        ECA('Mode', 1),
        ECA('Total GEM port-ID number', 2),
        ECA('SysUp Time', 4),
    ]


class Tcont(EntityClass):
    class_id = 262
    name = 'T-CONT'
    attributes = [
        ECA('Alloc-id', 2),
        ECA('Mode indicator', 1),
        ECA('Policy', 1),
    ]


class AniG(EntityClass):
    class_id = 263
    name = 'ANI-G'
    attributes = [
        ECA('SR indication', 1),
        ECA('Total T-CONT number', 2),
        ECA('GEM block length', 2),
        ECA('Piggyback DBA reporting', 1),
        ECA('Whole ONT DBA reporting', 1),
        ECA('SF threshold', 1),
        ECA('SD threshold', 1),
        ECA('ARC', 1),
        ECA('ARC interval', 1),
        ECA('Optical signal level', 2),
        ECA('Lower optical threshold', 1),
        ECA('Upper optical threshold', 1),
        ECA('ONT response time', 2),
        ECA('Transmit optical level', 2),
        ECA('Lower transmit power threshold', 1),
        ECA('Upper transmit power threshold', 1),
    ]
    alarms = {
        0: 'Low received optical power',
        1: 'High received optical power',
        2: 'Signal fail',
        3: 'Signal degrade',
        4: 'Low transmit optical power',
        5: 'High transmit optical power',
        6: 'Laser bias current',
    }


class UniG(EntityClass):
    class_id = 264
    name = 'UNI-G'
    attributes = [
        ECA('Config option status', 2),
        ECA('Administrative state', 1),
    ]


class GemInterworkingTp(EntityClass):
    class_id = 266
    name = 'GEM interworking Termination Point'
    attributes = [
        ECA('GEM port network CTP connectivity pointer', 2, SBC),
        ECA('Interworking option', 1, SBC),
        ECA('Service profile pointer', 2, SBC),
        ECA('Interworking termination point pointer', 2, SBC),
        ECA('PPTP counter', 1),
        ECA('Operational state', 1),
        ECA('GAL profile pointer', 2, SBC),
        ECA('GAL loopback configuration', 1),
    ]
    alarms = {
        6: 'Operational state change',
    }


class GemPortNetworkCtp(EntityClass):
    class_id = 268
    name = 'GEM Port Network CTP'
    attributes = [
        ECA('Port id value', 2, SBC),
        ECA('T-CONT pointer', 2, SBC),
        ECA('Direction', 1, SBC),
        ECA('Traffic management pointer for upstream', 2, SBC),
        ECA('Traffic descriptor profile pointer', 2, SBC),
        ECA('UNI counter', 1),
        ECA('Priority queue pointer for downstream', 2, SBC),
        ECA('Encryption state', 1),
    ]
    alarms = {
        5: 'End-to-end loss of continuity',
    }


class GalTdmProfile(EntityClass):
    class_id = 271
    name = 'GAL TDM profile'
    attributes = [
        ECA('GEM frame loss integration period', 2, SBC),
    ]


class GalEthernetProfile(EntityClass):
    class_id = 272
    name = 'GAL Ethernet profile'
    attributes = [
        ECA('Maximum GEM payload size', 2, SBC),
    ]


class ThresholdData1(EntityClass):
    class_id = 273
    name = 'Threshold Data 1'
    attributes = [
        ECA('Threshold value 1', 4, SBC),
        ECA('Threshold value 2', 4, SBC),
        ECA('Threshold value 3', 4, SBC),
        ECA('Threshold value 4', 4, SBC),
        ECA('Threshold value 5', 4, SBC),
        ECA('Threshold value 6', 4, SBC),
        ECA('Threshold value 7', 4, SBC),
    ]


class ThresholdData2(EntityClass):
    class_id = 274
    name = 'Threshold Data 2'
    attributes = [
        ECA('Threshold value 8', 4, SBC),
        ECA('Threshold value 9', 4, SBC),
        ECA('Threshold value 10', 4, SBC),
        ECA('Threshold value 11', 4, SBC),
        ECA('Threshold value 12', 4, SBC),
        ECA('Threshold value 13', 4, SBC),
        ECA('Threshold value 14', 4, SBC),
    ]


class GalEthernetPMHistoryData(EntityClass):
    class_id = 276
    name = 'GAL Ethernet performance monitoring history data'
    attributes = [
        ECA('Interval end time', 1),
        ECA('Threshold data 1/2 id', 2, SBC),
        ECA('Discarded frames', 4),
    ]


class PriorityQueueG(EntityClass):
    class_id = 277
    name = 'Priority queue'
    attributes = [
        ECA('Queue Configuration Option', 1),
        ECA('Maximum Queue Size', 2),
        ECA('Allocated Queue Size', 2),
        ECA('Discard-block Counter Reset Interval', 2),
        ECA('Threshold Value For Discarded Blocks Due To Buffer Overflow', 2),
        ECA('Related Port', 4),
        ECA('Traffic Scheduler-G Pointer', 2),
        ECA('Weight', 1),
        ECA('Back Pressure Operation', 2),
        ECA('Back Pressure Time', 4),
        ECA('Back Pressure Occur Queue Threshold', 2),
        ECA('Back Pressure Clear Queue Threshold', 2),
    ]
    alarms = {
        0: 'Block loss',
    }


class TrafficSchedulerG(EntityClass):
    class_id = 278
    name = 'Traffic scheduler'
    attributes = [
        ECA('TCONT pointer', 2),
        ECA('traffic shed pointer', 2),
        ECA('policy', 1),
        ECA('priority/weight', 1),
    ]


class ProtectionData(EntityClass):
    class_id = 279
    name = 'Protection data'
    attributes = [
        ECA('Working ANI-G pointer', 2),
        ECA('Protection ANI-G pointer', 2),
        ECA('Protection type', 2),
        ECA('Revertive ind', 1),
        ECA('Wait to restore time', 1),
        ECA('Switching guard time', 2),
    ]


class MulticastGemInterworkingTp(EntityClass):
    class_id = 281
    name = 'Multicast GEM interworking termination point'
    attributes = [
        ECA('GEM port network CTP connectivity pointer', 2, SBC),
        ECA('Interworking option', 1, SBC),
        ECA('Service profile pointer', 2, SBC),
        ECA('Interworking termination point pointer', 2, SBC),
        ECA('PPTP counter', 1),
        ECA('Operational state', 1),
        ECA('GAL profile pointer', 2, SBC),
        ECA('GAL loopback configuration', 1, SBC),
        ECA('Multicast address table', 12),
    ]


class Omci(EntityClass):
    class_id = 287
    name = 'OMCI'
    attributes = [
        ECA('ME Type Table', 2),
        ECA('Message Type Table', 2),
    ]


class Dot1XPortExtensionPackage(EntityClass):
    class_id = 290
    name = 'Dot1X Port Extension Package'
    attributes = [
        ECA('Dot1x Enable', 1),
        ECA('Action Register', 1),
        ECA('Authenticator PAE State', 1),
        ECA('Backend Authentication State', 1),
        ECA('Admin Controlled Directions', 1),
        ECA('Operational Controlled Directions', 1),
        ECA('Authenticator Controlled Port Status', 1),
        ECA('Quiet Period', 2),
        ECA('Server Timeout Period', 2),
        ECA('Reauthentication Period', 2),
        ECA('Reauthentication Enabled', 1),
        ECA('Key transmission Enabled', 1),
    ]


class Dot1XPMHistoryData(EntityClass):
    class_id = 292
    name = 'Dot1X performance monitoring history data'
    attributes = [
        ECA('Interval end time', 1),
        ECA('Threshold data 1 ID', 2, SBC),
    ]


class EthernetPMMonitoringHistoryData3(EntityClass):
    class_id = 296
    name = 'Ethernet performance monitoring history data 3'
    attributes = [
        ECA('Interval End Time', 1),
        ECA('Threshold Data 1/2 Id', 2, SBC),
        ECA('Drop events', 4),
        ECA('Octets', 4),
        ECA('Packets', 4),
        ECA('Broadcast Packets', 4),
        ECA('Multicast Packets', 4),
        ECA('Undersize Packets', 4),
        ECA('Fragments', 4),
        ECA('Jabbers', 4),
        ECA('Packets 64 Octets', 4),
        ECA('Packets 65 to 127 Octets', 4),
        ECA('Packets 128 to 255 Octets', 4),
        ECA('Packets 256 to 511 Octets', 4),
        ECA('Packets 512 to 1023 Octets', 4),
        ECA('Packets 1024 to 1518 Octets', 4),
    ]


class PortMappingPackage(EntityClass):
    class_id = 297
    name = 'Port-mapping package'
    attributes = [
        ECA('Max ports', 1),
        ECA('Port list 1', 16),
        ECA('Port list 2', 16),
        ECA('Port list 3', 16),
        ECA('Port list 4', 16),
        ECA('Port list 5', 16),
        ECA('Port list 6', 16),
        ECA('Port list 7', 16),
        ECA('Port list 8', 16),
    ]


class MulticastOperationsProfile(EntityClass):
    class_id = 309
    name = 'Multicast operations profile'
    attributes = [
        ECA('IGMP version', 1, SBC),
        ECA('IGMP function', 1, SBC),
        ECA('Immediate leave', 1, SBC),
        ECA('Upstream IGMP TCI', 2, SBC),
        ECA('Upstream IGMP tag control', 1, SBC),
        ECA('Upstream IGMP rate', 4, SBC),
        ECA('Dynamic access control list table', 24),
        ECA('Static access control list table', 24),
        ECA('Lost groups list table', 10),
        ECA('Robustness', 1, SBC),
        ECA('Querier IP address', 4, SBC),
        ECA('Query interval', 4, SBC),
        ECA('Query max response time', 4, SBC),
        ECA('Last member query interval', 4),
    ]
    alarms = {
        0: 'Lost multicast group',
    }


class MulticastSubscriberConfigInfo(EntityClass):
    class_id = 310
    name = 'Multicast subscriber config info'
    attributes = [
        ECA('ME type', 1, SBC),
        ECA('Multicast operations profile pointer', 2, SBC),
        ECA('Max simultaneous groups', 2, SBC),
        ECA('Max multicast bandwidth', 4, SBC),
        ECA('Bandwidth enforcement', 1, SBC),
    ]


class MulticastSubscriberMonitor(EntityClass):
    class_id = 311
    name = 'Multicast subscriber monitor'
    attributes = [
        ECA('ME type', 1, SBC),
        ECA('Current multicast bandwidth', 4),
        ECA('Max Join messages counter', 4),
        ECA('Bandwidth exceeded counter', 4),
        ECA('Active group list table', 24),
    ]


class FecPerformanceMonitoringHistoryData(EntityClass):
    class_id = 312
    name = 'FEC performance monitoring history data'
    attributes = [
        ECA('Interval end time', 1),
        ECA('Threshold data 1/2 id', 2, SBC),
        ECA('Corrected bytes', 4),
        ECA('Corrected code words', 4),
        ECA('Uncorrectable code words', 4),
        ECA('Total code words', 4),
        ECA('FEC seconds', 2),
    ]
    alarms = {
        0: 'Corrected bytes',
        1: 'Corrected code words',
        2: 'Uncorrectable code words',
        4: 'FEC seconds',
    }


class EthernetFrameDownstreamPerformanceMonitoringHistoryData(EntityClass):
    class_id = 321
    name = 'Ethernet frame performance monitoring history data downstream'
    attributes = [
        ECA('Interval End Time', 1),
        ECA('Threshold Data 1/2 Id', 2, SBC),
        ECA('Drop events', 4),
        ECA('Octets', 4),
        ECA('Packets', 4),
        ECA('Broadcast Packets', 4),
        ECA('Multicast Packets', 4),
        ECA('CRC Errored Packets', 4),
        ECA('Undersize Packets', 4),
        ECA('Oversize Packets', 4),
        ECA('Packets 64 Octets', 4),
        ECA('Packets 65 to 127 Octets', 4),
        ECA('Packets 128 to 255 Octets', 4),
        ECA('Packets 256 to 511 Octets', 4),
        ECA('Packets 512 to 1023 Octets', 4),
        ECA('Packets 1024 to 1518 Octets', 4),
    ]
    alarms = {
        0: 'Drop events',
        1: 'CRC errored packets',
        2: 'Undersize packets',
        3: 'Oversize packets',
    }


class EthernetFrameUpstreamPerformanceMonitoringHistoryData(EntityClass):
    class_id = 322
    name = 'Ethernet frame performance monitoring history data upstream'
    attributes = [
        ECA('Interval End Time', 1),
        ECA('Threshold Data 1/2 Id', 2, SBC),
        ECA('Drop events', 4),
        ECA('Octets', 4),
        ECA('Packets', 4),
        ECA('Broadcast Packets', 4),
        ECA('Multicast Packets', 4),
        ECA('CRC Errored Packets', 4),
        ECA('Undersize Packets', 4),
        ECA('Oversize Packets', 4),
        ECA('Packets 64 Octets', 4),
        ECA('Packets 65 to 127 Octets', 4),
        ECA('Packets 128 to 255 Octets', 4),
        ECA('Packets 256 to 511 Octets', 4),
        ECA('Packets 512 to 1023 Octets', 4),
        ECA('Packets 1024 to 1518 Octets', 4),
    ]
    alarms = {
        0: 'Drop events',
        1: 'CRC errored packets',
        2: 'Undersize packets',
        3: 'Oversize packets',
    }


class VeipUni(EntityClass):
    class_id = 329
    name = 'Virtual Ethernet interface point'
    attributes = [
        ECA('Administrative state', 1),
        ECA('Operational state', 1),
        ECA('Interdomain name', 25),
        ECA('TCP/UDP pointer', 2),
        ECA('IANA assigned port', 2),
    ]
    alarms = {
        0: 'Connecting function fail',
    }


class EnhSecurityControl(EntityClass):
    class_id = 332
    name = 'Enhanced security control'
    attributes = [
        ECA('OLT crypto capabilities', 16),
        ECA('OLT random challenge table', 17),
        ECA('OLT challenge status', 1),
        ECA('ONU selected crypto capabilities', 1),
        ECA('ONU random challenge table', 16),
        ECA('ONU authentication result table', 16),
        ECA('OLT authentication result table', 17),
        ECA('OLT result status', 1),
        ECA('ONU authentication status', 1),
        ECA('Master session key name', 16),
        ECA('Broadcast key table', 18),
        ECA('Effective key length', 2),
    ]


class EthernetFrameExtendedPerformanceMonitoring(EntityClass):
    class_id = 334
    name = 'Ethernet frame extended PM'
    attributes = [
        ECA('Interval end time', 1),
        ECA('Threshold data 1 ID', 2, SBC),
        ECA('Parent ME class', 2, SBC),
        ECA('Parent ME instance', 2, SBC),
        ECA('Accumulation disable', 2, SBC),
        ECA('TCA disable', 2, SBC),
        ECA('Control fields', 2, SBC),
        ECA('TCI', 2, SBC),
        ECA('Reserved', 2, SBC),
    ]
    alarms = {
        0: 'Drop events',
        1: 'CRC errored packets',
        2: 'Undersize packets',
        3: 'Oversize packets',
    }


class Tr069ManagementServer(EntityClass):
    class_id = 340
    name = 'BBF TR-069 management server'
    attributes = [
        ECA('Administrative state', 1),
        ECA('ACS network address', 2),
        ECA('Associated tag', 2),
    ]


class GemPortNetworkCtpMonitoringHistoryData(EntityClass):
    class_id = 341
    name = 'GEM port network CTP performance monitoring history data'
    attributes = [
        ECA('Interval end time', 1),
        ECA('Threshold data 1 ID', 2, SBC),
    ]
    alarms = {
        1: 'Encryption key errors',
    }


class Ipv6HostConfigData(EntityClass):
    class_id = 347
    name = 'IPv6 host config data'
    attributes = [
        ECA('IP options', 1),
        ECA('MAC address', 6),
        ECA('IPv6 link local address', 16),
        ECA('IPv6 address', 16),
        ECA('Default router', 16),
        ECA('Primary DNS', 16),
        ECA('Secondary DNS', 16),
        ECA('Current address table', 24),
        ECA('Current default router table', 16),
        ECA('Current DNS table', 16),
        ECA('DUID', 25),
        ECA('On-link prefix', 17),
        ECA('Current on-link prefix table', 26),
        ECA('Relay agent options', 2),
    ]


# G.988 managed entity class names, by code point
entity_class_names = {
    1: 'ONT B-PON',
    2: 'ONU data',
    3: 'PON IF line cardholder',
    4: 'PON IF line card',
    5: 'Cardholder',
    6: 'Circuit pack',
    7: 'Software image',
    8: 'UNI B-PON',
    9: 'TC Adapter B-PON',
    10: 'Physical path termination point ATM UNI',
    11: 'Physical path termination point Ethernet UNI',
    12: 'Physical path termination point CES UNI',
    13: 'Logical N x 64 kbit/s sub-port connection termination point',
    14: 'Interworking VCC termination point',
    15: 'AAL1 profile B-PON',
    16: 'AAL5 profile',
    17: 'AAL1 protocol monitoring history data B-PON',
    18: 'AAL5 performance monitoring history data',
    19: 'AAL2 profile',
    20: 'Intentionally left blank',
    21: 'CES service profile',
    22: 'Reserved',
    23: 'CES physical interface performance monitoring history data',
    24: 'Ethernet performance monitoring history data',
    25: 'VP network CTP B-PON',
    26: 'ATM VP cross-connection',
    27: 'Priority queue B-PON',
    28: 'DBR/CBR traffic descriptor',
    29: 'UBR traffic descriptor',
    30: 'SBR1/VBR1 traffic descriptor',
    31: 'SBR2/VBR2 traffic descriptor',
    32: 'SBR3/VBR3 traffic descriptor',
    33: 'ABR traffic descriptor',
    34: 'GFR traffic descriptor',
    35: 'ABT/DT/IT traffic descriptor',
    36: 'UPC disagreement monitoring history data B-PON',
    37: 'Intentionally left blank',
    38: 'ANI (B-PON)',
    39: 'PON TC adapter',
    40: 'PON physical path termination point',
    41: 'TC adapter protocol monitoring history data',
    42: 'Threshold data B-PON',
    43: 'Operator specific',
    44: 'Vendor specific',
    45: 'MAC bridge service profile',
    46: 'MAC bridge configuration data',
    47: 'MAC bridge port configuration data',
    48: 'MAC bridge port designation data',
    49: 'MAC bridge port filter table data',
    50: 'MAC bridge port bridge table data',
    51: 'MAC bridge performance monitoring history data',
    52: 'MAC bridge port performance monitoring history data',
    53: 'Physical path termination point POTS UNI',
    54: 'Voice CTP',
    55: 'Voice PM history data',
    56: 'AAL2 PVC profile B-PON',
    57: 'AAL2 CPS protocol monitoring history data B-PON',
    58: 'Voice service profile',
    59: 'LES service profile',
    60: 'AAL2 SSCS parameter profile1',
    61: 'AAL2 SSCS parameter profile2',
    62: 'VP performance monitoring history data',
    63: 'Traffic scheduler B-PON',
    64: 'T-CONT buffer',
    65: 'UBR+ traffic descriptor',
    66: 'AAL2 SSCS protocol monitoring history data B-PON',
    67: 'IP port configuration data',
    68: 'IP router service profile',
    69: 'IP router configuration data',
    70: 'IP router performance monitoring history data 1',
    71: 'IP router performance monitoring history data 2',
    72: 'ICMP performance monitoring history data 1',
    73: 'ICMP performance monitoring history data 2',
    74: 'IP route table',
    75: 'IP static routes',
    76: 'ARP service profile',
    77: 'ARP configuration data',
    78: 'VLAN tagging operation configuration data',
    79: 'MAC bridge port filter pre-assign table',
    80: 'Physical path termination point ISDN UNI',
    81: 'Reserved',
    82: 'Physical path termination point video UNI',
    83: 'Physical path termination point LCT UNI',
    84: 'VLAN tagging filter data',
    85: 'ONU B-PON',
    86: 'ATM VC cross-connection',
    87: 'VC network CTP B-PON',
    88: 'VC PM history data',
    89: 'Ethernet performance monitoring history data 2',
    90: 'Physical path termination point video ANI',
    91: 'Physical path termination point IEEE 802.11 UNI',
    92: 'IEEE 802.11 station management data 1',
    93: 'IEEE 802.11 station management data 2',
    94: 'IEEE 802.11 general purpose object',
    95: 'IEEE 802.11 MAC and PHY operation and antenna data',
    96: 'IEEE 802.11 performance monitoring history data',
    97: 'IEEE 802.11 PHY FHSS DSSS IR tables',
    98: 'Physical path termination point xDSL UNI part 1',
    99: 'Physical path termination point xDSL UNI part 2',
    100: 'xDSL line inventory and status data part 1',
    101: 'xDSL line inventory and status data part 2',
    102: 'xDSL channel downstream status data',
    103: 'xDSL channel upstream status data',
    104: 'xDSL line configuration profile part 1',
    105: 'xDSL line configuration profile part 2',
    106: 'xDSL line configuration profile part 3',
    107: 'xDSL channel configuration profile',
    108: 'xDSL subcarrier masking downstream profile',
    109: 'xDSL subcarrier masking upstream profile',
    110: 'xDSL PSD mask profile',
    111: 'xDSL downstream RFI bands profile',
    112: 'xDSL xTU-C performance monitoring history data part 1',
    113: 'xDSL xTU-R performance monitoring history data',
    114: 'xDSL xTU-C channel performance monitoring history data',
    115: 'xDSL xTU-R channel performance monitoring history data',
    116: 'TC adaptor performance monitoring history data xDSL',
    117: 'Physical path termination point VDSL UNI (ITU-T G.993.1 VDSL1)',
    118: 'VDSL VTU-O physical data',
    119: 'VDSL VTU-R physical data',
    120: 'VDSL channel data',
    121: 'VDSL line configuration profile',
    122: 'VDSL channel configuration profile',
    123: 'VDSL band plan configuration profile',
    124: 'VDSL VTU-O physical interface monitoring history data',
    125: 'VDSL VTU-R physical interface monitoring history data',
    126: 'VDSL VTU-O channel performance monitoring history data',
    127: 'VDSL VTU-R channel performance monitoring history data',
    128: 'Video return path service profile',
    129: 'Video return path performance monitoring history data',
    130: 'IEEE 802.1p mapper service profile',
    131: 'OLT-G',
    132: 'Multicast interworking VCC termination point',
    133: 'ONU power shedding',
    134: 'IP host config data',
    135: 'IP host performance monitoring history data',
    136: 'TCP/UDP config data',
    137: 'Network address',
    138: 'VoIP config data',
    139: 'VoIP voice CTP',
    140: 'Call control performance monitoring history data',
    141: 'VoIP line status',
    142: 'VoIP media profile',
    143: 'RTP profile data',
    144: 'RTP performance monitoring history data',
    145: 'Network dial plan table',
    146: 'VoIP application service profile',
    147: 'VoIP feature access codes',
    148: 'Authentication security method',
    149: 'SIP config portal',
    150: 'SIP agent config data',
    151: 'SIP agent performance monitoring history data',
    152: 'SIP call initiation performance monitoring history data',
    153: 'SIP user data',
    154: 'MGC config portal',
    155: 'MGC config data',
    156: 'MGC performance monitoring history data',
    157: 'Large string',
    158: 'ONU remote debug',
    159: 'Equipment protection profile',
    160: 'Equipment extension package',
    161: 'Port-mapping package B-PON (B-PON only; use 297 for G-PON)',
    162: 'Physical path termination point MoCA UNI',
    163: 'MoCA Ethernet performance monitoring history data',
    164: 'MoCA interface performance monitoring history data',
    165: 'VDSL2 line configuration extensions',
    166: 'xDSL line inventory and status data part 3',
    167: 'xDSL line inventory and status data part 4',
    168: 'VDSL2 line inventory and status data part 1',
    169: 'VDSL2 line inventory and status data part 2',
    170: 'VDSL2 line inventory and status data part 3',
    171: 'Extended VLAN tagging operation configuration data',
    256: 'ONU-G (NOTE - In [ITU-T G.984.4] this was called ONT-G)',
    257: 'ONU2-G (NOTE - In [ITU-T G.984.4] this was called ONT2-G)',
    258: 'ONU-G (deprecated - note that the name is re-used for code point 256)',
    259: 'ONU2-G (deprecated - note that the name is re-used for code point 257)',
    260: 'PON IF line card-G',
    261: 'PON TC adapter-G',
    262: 'T-CONT',
    263: 'ANI-G',
    264: 'UNI-G',
    265: 'ATM interworking VCC termination point',
    266: 'GEM interworking termination point',
    267: 'GEM port performance monitoring history data (obsolete)',
    268: 'GEM port network CTP',
    269: 'VP network CTP',
    270: 'VC network CTP-G',
    271: 'GAL TDM profile (deprecated)',
    272: 'GAL Ethernet profile',
    273: 'Threshold data 1',
    274: 'Threshold data 2',
    275: 'GAL TDM performance monitoring history data (deprecated)',
    276: 'GAL Ethernet performance monitoring history data',
    277: 'Priority queue',
    278: 'Traffic scheduler',
    279: 'Protection data',
    280: 'Traffic descriptor',
    281: 'Multicast GEM interworking termination point',
    282: 'Pseudowire termination point',
    283: 'RTP pseudowire parameters',
    284: 'Pseudowire maintenance profile',
    285: 'Pseudowire performance monitoring history data',
    286: 'Ethernet flow termination point',
    287: 'OMCI',
    288: 'Managed entity',
    289: 'Attribute',
    290: 'Dot1X port extension package',
    291: 'Dot1X configuration profile',
    292: 'Dot1X performance monitoring history data',
    293: 'Radius performance monitoring history data',
    294: 'TU CTP',
    295: 'TU performance monitoring history data',
    296: 'Ethernet performance monitoring history data 3',
    297: 'Port-mapping package',
    298: 'Dot1 rate limiter',
    299: 'Dot1ag maintenance domain',
    300: 'Dot1ag maintenance association',
    301: 'Dot1ag default MD level',
    302: 'Dot1ag MEP',
    303: 'Dot1ag MEP status',
    304: 'Dot1ag MEP CCM database',
    305: 'Dot1ag CFM stack',
    306: 'Dot1ag chassis-management info',
    307: 'Octet string',
    308: 'General purpose buffer',
    309: 'Multicast operations profile',
    310: 'Multicast subscriber config info',
    311: 'Multicast subscriber monitor',
    312: 'FEC performance monitoring history data',
    313: 'RE ANI-G',
    314: 'Physical path termination point RE UNI',
    315: 'RE upstream amplifier',
    316: 'RE downstream amplifier',
    317: 'RE config portal',
    318: 'File transfer controller',
    319: 'CES physical interface performance monitoring history data 2',
    320: 'CES physical interface performance monitoring history data 3',
    321: 'Ethernet frame performance monitoring history data downstream',
    322: 'Ethernet frame performance monitoring history data upstream',
    323: 'VDSL2 line configuration extensions 2',
    324: 'xDSL impulse noise monitor performance monitoring history data',
    325: 'xDSL line inventory and status data part 5',
    326: 'xDSL line inventory and status data part 6',
    327: 'xDSL line inventory and status data part 7',
    328: 'RE common amplifier parameters',
    329: 'Virtual Ethernet interface point',
    330: 'Generic status portal',
    331: 'ONU-E',
    332: 'Enhanced security control',
    333: 'MPLS pseudowire termination point',
    334: 'Ethernet frame extended PM',
    335: 'SNMP configuration data',
    336: 'ONU dynamic power management control',
    337: 'PW ATM configuration data',
    338: 'PW ATM performance monitoring history data',
    339: 'PW Ethernet configuration data',
    340: 'BBF TR-069 management server',
    341: 'GEM port network CTP performance monitoring history data',
    342: 'TCP/UDP performance monitoring history data',
    343: 'Energy consumption performance monitoring history data',
    344: 'XG-PON TC performance monitoring history data',
    345: 'XG-PON downstream management performance monitoring history data',
    346: 'XG-PON upstream management performance monitoring history data',
    347: 'IPv6 host config data',
    348: 'MAC bridge port ICMPv6 process pre-assign table',
    349: 'PoE control',
    400: 'Ethernet pseudowire parameters',
    401: 'Physical path termination point RS232/RS485 UNI',
    402: 'RS232/RS485 port operation configuration data',
    403: 'RS232/RS485 performance monitoring history data',
    404: 'L2 multicast GEM interworking termination point',
    405: 'ANI-E',
    406: 'EPON downstream performance monitoring configuration',
    407: 'SIP agent config data 2',
    408: 'xDSL xTU-C performance monitoring history data part 2',
    409: 'PTM performance monitoring history data xDSL',
    410: 'VDSL2 line configuration extensions 3',
    411: 'Vectoring line configuration extensions',
    412: 'xDSL channel configuration profile part 2',
    413: 'xTU data gathering configuration',
    414: 'xDSL line inventory and status data part 8',
    415: 'VDSL2 line inventory and status data part 4',
    416: 'Vectoring line inventory and status data',
    417: 'Data gathering line test, diagnostic and status',
    418: 'EFM bonding group',
    419: 'EFM bonding link',
    420: 'EFM bonding group performance monitoring history data',
    421: 'EFM bonding group performance monitoring history data part 2',
    422: 'EFM bonding link performance monitoring history data',
    423: 'EFM bonding port performance monitoring history data',
    424: 'EFM bonding port performance monitoring history data part 2',
    425: 'Ethernet frame extended PM 64 bit',
    426: 'Threshold data 64 bit',
    427: 'Physical path termination point UNI part 3 (FAST)',
    428: 'FAST line configuration profile part 1',
    429: 'FAST line configuration profile part 2',
    430: 'FAST line configuration profile part 3',
    431: 'FAST line configuration profile part 4',
    432: 'FAST channel configuration profile, part 1',
    433: 'FAST data path configuration profile',
    434: 'FAST vectoring line configuration extensions',
    435: 'FAST line inventory and status data',
    436: 'FAST line inventory and status data part 2',
    437: 'FAST xTU-C performance monitoring history data',
    438: 'FAST xTU-R performance monitoring history data',
    439: 'OpenFlow config data',
    440: 'Time Status Message',
    441: 'ONU3-G',
    442: 'TWDM System Profile managed entity',
    443: 'TWDM channel managed entity',
    444: 'TWDM channel PHY/LODS performance monitoring history data',
    445: 'TWDM channel XGEM performance monitoring history data',
    446: 'TWDM channel PLOAM performance monitoring history data part 1',
    447: 'TWDM channel PLOAM performance monitoring history data part 2',
    448: 'TWDM channel PLOAM performance monitoring history data part 3',
    449: 'TWDM channel tuning performance monitoring history data part 1',
    450: 'TWDM channel tuning performance monitoring history data part 2',
    451: 'TWDM channel tuning performance monitoring history data part 3',
    452: 'TWDM channel OMCI performance monitoring history data',
    453: 'Enhanced FEC performance monitoring history data',
    454: 'Enhanced TC performance monitoring history data',
    455: 'Link aggregation service profile',
    456: 'ONU manufacturing data',
    457: 'ONU time configuration',
    458: 'IP host performance monitoring history data part 2',
    459: 'ONU operational performance monitoring history data',
    460: 'ONU4-G',
    461: 'BBF TR-369 USP agent',
    462: 'FAST channel configuration profile, part 2',
    463: 'FAST line failures performance monitoring data',
    464: 'Synchronous Ethernet operation',
    465: 'Precision Time Protocol',
    466: 'Precision Time Protocol status',
}


# entity class lookup table from entity_class values
entity_classes_name_map = dict(
    inspect.getmembers(sys.modules[__name__],
    lambda o: inspect.isclass(o) and \
              issubclass(o, EntityClass) and \
              o is not EntityClass)
)

entity_classes = [c for c in entity_classes_name_map.values()]
entity_id_to_class_map = dict((c.class_id, c) for c in entity_classes)

# Code points that are assigned but have no attribute table here decode
# with an empty attribute list
for _class_id, _name in entity_class_names.items():
    if _class_id not in entity_id_to_class_map:
        entity_id_to_class_map[_class_id] = type(
            'EntityClass{}'.format(_class_id), (EntityClass,),
            dict(class_id=_class_id, name=_name))


# (first, last + 1, name) half-open ranges for unassigned class ids
class_id_fallback_ranges = [
    (172, 240, 'Reserved for future B-PON entities'),
    (240, 256, 'Reserved vendor-specific (legacy)'),
    (350, 400, 'Reserved vendor-specific'),
    (467, 65280, 'Reserved for future standardization'),
    (65280, 65536, 'Reserved vendor-specific'),
]


def fallback_class_name(class_id):
    for first, end, name in class_id_fallback_ranges:
        if first <= class_id < end:
            return name
    return 'Unknown ({})'.format(class_id)


def lookup_class(class_id):
    """
    Resolve a managed entity class id

    Never fails: ids without a definition get a placeholder class with
    no attributes, named after the range the id falls into.

    :param class_id: (int) 16-bit managed entity class id
    :return: (EntityClass) subclass describing the managed entity
    """
    entity_class = entity_id_to_class_map.get(class_id)
    if entity_class is not None:
        return entity_class

    return type('UnknownEntityClass', (EntityClass,),
                dict(class_id=class_id,
                     name=fallback_class_name(class_id),
                     placeholder=True))
