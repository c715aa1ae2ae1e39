"""Operation table of the configuration manager client."""

from g2mock.client.domain.operation import Operation

COMPONENT = "configmgr"
COMPONENT_ID = 6022

ADD_CONFIG = Operation(
    name="add_config",
    event_id=8001,
    trace_entry=1,
    trace_exit=2,
    details={"configComments": "config_comments"},
)
DESTROY = Operation(name="destroy", event_id=8002, trace_entry=5, trace_exit=6)
GET_CONFIG = Operation(name="get_config", event_id=8003, trace_entry=7, trace_exit=8)
GET_CONFIG_LIST = Operation(
    name="get_config_list", event_id=8004, trace_entry=9, trace_exit=10
)
GET_DEFAULT_CONFIG_ID = Operation(
    name="get_default_config_id", event_id=8005, trace_entry=11, trace_exit=12
)
INIT = Operation(
    name="init",
    event_id=8006,
    trace_entry=17,
    trace_exit=18,
    details={
        "iniParams": "ini_params",
        "moduleName": "module_name",
        "verboseLogging": "verbose_logging",
    },
)
REPLACE_DEFAULT_CONFIG_ID = Operation(
    name="replace_default_config_id",
    event_id=8007,
    trace_entry=19,
    trace_exit=20,
    details={"newConfigID": "new_config_id"},
)
SET_DEFAULT_CONFIG_ID = Operation(
    name="set_default_config_id",
    event_id=8008,
    trace_entry=21,
    trace_exit=22,
    details={"configID": "config_id"},
)
REGISTER_OBSERVER = Operation(
    name="register_observer", event_id=8010, trace_entry=25, trace_exit=26
)
SET_LOG_LEVEL = Operation(
    name="set_log_level", event_id=8011, trace_entry=23, trace_exit=24
)
UNREGISTER_OBSERVER = Operation(
    name="unregister_observer", event_id=8012, trace_entry=27, trace_exit=28
)
GET_SDK_ID = Operation(name="get_sdk_id", event_id=8013, trace_entry=29, trace_exit=30)

OPERATIONS: tuple[Operation, ...] = (
    ADD_CONFIG,
    DESTROY,
    GET_CONFIG,
    GET_CONFIG_LIST,
    GET_DEFAULT_CONFIG_ID,
    INIT,
    REPLACE_DEFAULT_CONFIG_ID,
    SET_DEFAULT_CONFIG_ID,
    REGISTER_OBSERVER,
    SET_LOG_LEVEL,
    UNREGISTER_OBSERVER,
    GET_SDK_ID,
)
