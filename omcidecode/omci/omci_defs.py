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
from enum import Enum, IntEnum


class OmciDecodeError(Exception):
    pass


class OmciTruncatedFrameError(OmciDecodeError):
    pass


class OmciInvalidTestIdError(OmciDecodeError):
    pass


def bitpos_from_mask(mask, lsb_pos=0, increment=1):
    """
    Turn a decimal value (bitmask) into a list of indices where each
    index value corresponds to the bit position of a bit that was set (1)
    in the mask. What numbers are assigned to the bit positions is controlled
    by lsb_pos and increment, as explained below.
    :param mask: a decimal value used as a bit mask
    :param lsb_pos: The decimal value associated with the LSB bit
    :param increment: If this is +i, then the bit next to LSB will take
    the decimal value of lsb_pos + i.
    :return: List of bit positions where the bit was set in mask
    """
    out = []
    while mask:
        if mask & 0x01:
            out.append(lsb_pos)
        lsb_pos += increment
        mask >>= 1
    return sorted(out)


# Baseline message layout (octets)
OmciHeaderSize = 8
OmciContentSize = 32
OmciTrailerSize = 8
OmciMinimumFrameSize = OmciHeaderSize + OmciContentSize

# Frames longer than this on the wire carry the CPCS trailer
OmciTrailerThreshold = 46

OmciAlarmBitmapSize = 28
OmciAttributeMaskSize = 2

# Device identifier octet
OmciBaselineDeviceId = 0x0A     # ITU-T G.984.4 G-PON
OmciExtendedDeviceId = 0x0B     # ITU-T G.988 XG-PON


class OmciMessageType(IntEnum):
    # codes of the 5-bit message type field, G.988 table 11.2.2-1
    Create = 4
    CreateCompleteConnection = 5
    Delete = 6
    DeleteCompleteConnection = 7
    Set = 8
    Get = 9
    GetCompleteConnection = 10
    GetAllAlarms = 11
    GetAllAlarmsNext = 12
    MibUpload = 13
    MibUploadNext = 14
    MibReset = 15
    AlarmNotification = 16
    AttributeValueChange = 17
    Test = 18
    StartSoftwareDownload = 19
    DownloadSection = 20
    EndSoftwareDownload = 21
    ActivateSoftware = 22
    CommitSoftware = 23
    SynchronizeTime = 24
    Reboot = 25
    GetNext = 26
    TestResult = 27
    GetCurrentData = 28
    SetTable = 29       # Defined in Extended Message Set Only


message_type_names = {
    OmciMessageType.Create: 'Create',
    OmciMessageType.CreateCompleteConnection: 'Create Complete Connection',
    OmciMessageType.Delete: 'Delete',
    OmciMessageType.DeleteCompleteConnection: 'Delete Complete Connection',
    OmciMessageType.Set: 'Set',
    OmciMessageType.Get: 'Get',
    OmciMessageType.GetCompleteConnection: 'Get Complete Connection',
    OmciMessageType.GetAllAlarms: 'Get All Alarms',
    OmciMessageType.GetAllAlarmsNext: 'Get All Alarms Next',
    OmciMessageType.MibUpload: 'MIB Upload',
    OmciMessageType.MibUploadNext: 'MIB Upload Next',
    OmciMessageType.MibReset: 'MIB Reset',
    OmciMessageType.AlarmNotification: 'Alarm',
    OmciMessageType.AttributeValueChange: 'Attribute Value Change',
    OmciMessageType.Test: 'Test',
    OmciMessageType.StartSoftwareDownload: 'Start Software Download',
    OmciMessageType.DownloadSection: 'Download Section',
    OmciMessageType.EndSoftwareDownload: 'End Software Download',
    OmciMessageType.ActivateSoftware: 'Activate Software',
    OmciMessageType.CommitSoftware: 'Commit Software',
    OmciMessageType.SynchronizeTime: 'Synchronize Time',
    OmciMessageType.Reboot: 'Reboot',
    OmciMessageType.GetNext: 'Get Next',
    OmciMessageType.TestResult: 'Test Result',
    OmciMessageType.GetCurrentData: 'Get Current Data',
    OmciMessageType.SetTable: 'Set Table',
}

ReservedMessageTypeName = 'Reserved'


def message_type_from_code(code):
    """
    Resolve a 5-bit message type code

    :param code: (int) message type code
    :return: (OmciMessageType) or None for reserved code points
    """
    try:
        return OmciMessageType(code)
    except ValueError:
        return None


def lookup_message_type(code):
    """Name of a message type code, 'Reserved' outside 4..29"""
    msg_type = message_type_from_code(code)
    if msg_type is None:
        return ReservedMessageTypeName
    return message_type_names[msg_type]


class ReasonCodes(IntEnum):
    # OMCI Result and reason codes
    Success = 0,            # Command processed successfully
    ProcessingError = 1,    # Command processing error
    NotSupported = 2,       # Command not supported
    ParameterError = 3,     # Parameter error
    UnknownEntity = 4,      # Unknown managed entity
    UnknownInstance = 5,    # Unknown managed entity instance
    DeviceBusy = 6,         # Device busy
    InstanceExists = 7,     # Instance Exists
    AttributeFailure = 9,   # Attribute(s) failed or unknown


result_code_names = {
    ReasonCodes.Success: 'Command processed successfully',
    ReasonCodes.ProcessingError: 'Command processing error',
    ReasonCodes.NotSupported: 'Command not supported',
    ReasonCodes.ParameterError: 'Command parameter error',
    ReasonCodes.UnknownEntity: 'Unknown managed entity',
    ReasonCodes.UnknownInstance: 'Unknown managed entity instance',
    ReasonCodes.DeviceBusy: 'Device busy',
    ReasonCodes.InstanceExists: 'Instance exists',
    ReasonCodes.AttributeFailure: 'Attribute failed or unknown',
}

UnknownResultCodeName = 'Unknown'


def lookup_result_code(code):
    """Name of a result/reason code, 'Unknown' for 8 and anything above 9"""
    try:
        return result_code_names[ReasonCodes(code)]
    except ValueError:
        return UnknownResultCodeName


class TestIdentifier(Enum):
    ReservedForFutureUse = 'Reserved for future use'
    SelfTest = 'Self test'
    VendorSpecific = 'Vendor specific'


def lookup_test_id(code):
    """
    Classify the 'test to perform' octet of a Test request

    :param code: (int) test identifier
    :return: (TestIdentifier)
    :raises OmciInvalidTestIdError: value is not an octet
    """
    if 0 <= code <= 6:
        return TestIdentifier.ReservedForFutureUse
    elif code == 7:
        return TestIdentifier.SelfTest
    elif 8 <= code <= 255:
        return TestIdentifier.VendorSpecific
    raise OmciInvalidTestIdError('Not a Test ID ({})'.format(code))


class DiagnosticType(Enum):
    UnknownClass = 'unknown-class'
    UnknownMessageType = 'unknown-message-type'
    UnknownResultCode = 'unknown-result-code'
    MalformedTestSlot = 'malformed-test-slot'
    UnimplementedShape = 'unimplemented-shape'
    AttributeOverrun = 'attribute-overrun'
    TruncatedTrailer = 'truncated-trailer'
