"""Operation table of the product information client."""

from g2mock.client.domain.operation import Operation

COMPONENT = "product"
COMPONENT_ID = 6026

DESTROY = Operation(name="destroy", event_id=8001, trace_entry=3, trace_exit=4)
INIT = Operation(
    name="init",
    event_id=8002,
    trace_entry=9,
    trace_exit=10,
    details={
        "iniParams": "ini_params",
        "moduleName": "module_name",
        "verboseLogging": "verbose_logging",
    },
)
LICENSE = Operation(name="license", event_id=8003, trace_entry=11, trace_exit=12)
VALIDATE_LICENSE_FILE = Operation(
    name="validate_license_file", event_id=8004, trace_entry=15, trace_exit=16
)
VALIDATE_LICENSE_STRING_BASE64 = Operation(
    name="validate_license_string_base64", event_id=8005, trace_entry=17, trace_exit=18
)
VERSION = Operation(name="version", event_id=8006, trace_entry=19, trace_exit=20)
GET_SDK_ID = Operation(name="get_sdk_id", event_id=8007, trace_entry=25, trace_exit=26)
REGISTER_OBSERVER = Operation(
    name="register_observer", event_id=8008, trace_entry=21, trace_exit=22
)
SET_LOG_LEVEL = Operation(
    name="set_log_level", event_id=8009, trace_entry=13, trace_exit=14
)
UNREGISTER_OBSERVER = Operation(
    name="unregister_observer", event_id=8010, trace_entry=23, trace_exit=24
)

OPERATIONS: tuple[Operation, ...] = (
    DESTROY,
    INIT,
    LICENSE,
    VALIDATE_LICENSE_FILE,
    VALIDATE_LICENSE_STRING_BASE64,
    VERSION,
    GET_SDK_ID,
    REGISTER_OBSERVER,
    SET_LOG_LEVEL,
    UNREGISTER_OBSERVER,
)
