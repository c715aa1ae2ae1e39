"""Operation table of the engine client."""

from g2mock.client.domain.operation import CannedField, DetailSource, Operation

COMPONENT = "engine"
COMPONENT_ID = 6024

_RECORD: dict[str, DetailSource] = {
    "dataSourceCode": "data_source_code",
    "recordID": "record_id",
    "loadID": "load_id",
}
_RECORD_KEY: dict[str, DetailSource] = {
    "dataSourceCode": "data_source_code",
    "recordID": "record_id",
}
_RECORD_PAIR: dict[str, DetailSource] = {
    "dataSourceCode1": "data_source_code1",
    "recordID1": "record_id1",
    "dataSourceCode2": "data_source_code2",
    "recordID2": "record_id2",
}
_ENTITY: dict[str, DetailSource] = {"entityID": "entity_id"}
_ENTITY_PAIR: dict[str, DetailSource] = {
    "entityID1": "entity_id1",
    "entityID2": "entity_id2",
}
_INIT: dict[str, DetailSource] = {
    "iniParams": "ini_params",
    "moduleName": "module_name",
    "verboseLogging": "verbose_logging",
}

# Record maintenance

ADD_RECORD = Operation(
    name="add_record", event_id=8001, trace_entry=1, trace_exit=2, details=_RECORD
)
ADD_RECORD_WITH_INFO = Operation(
    name="add_record_with_info",
    event_id=8002,
    trace_entry=3,
    trace_exit=4,
    details=_RECORD,
)
ADD_RECORD_WITH_INFO_WITH_RETURNED_RECORD_ID = Operation(
    name="add_record_with_info_with_returned_record_id",
    event_id=8003,
    trace_entry=5,
    trace_exit=6,
    details={
        "dataSourceCode": "data_source_code",
        "recordID": CannedField(
            name="add_record_with_info_with_returned_record_id_record_id"
        ),
        "loadID": "load_id",
    },
)
ADD_RECORD_WITH_RETURNED_RECORD_ID = Operation(
    name="add_record_with_returned_record_id",
    event_id=8004,
    trace_entry=7,
    trace_exit=8,
    details={
        "dataSourceCode": "data_source_code",
        "recordID": CannedField(name="add_record_with_returned_record_id"),
        "loadID": "load_id",
    },
)
CHECK_RECORD = Operation(
    name="check_record", event_id=8005, trace_entry=9, trace_exit=10
)
DELETE_RECORD = Operation(
    name="delete_record", event_id=8008, trace_entry=17, trace_exit=18, details=_RECORD
)
DELETE_RECORD_WITH_INFO = Operation(
    name="delete_record_with_info",
    event_id=8009,
    trace_entry=19,
    trace_exit=20,
    details=_RECORD,
)
REPLACE_RECORD = Operation(
    name="replace_record",
    event_id=8062,
    trace_entry=129,
    trace_exit=130,
    details=_RECORD,
)
REPLACE_RECORD_WITH_INFO = Operation(
    name="replace_record_with_info",
    event_id=8063,
    trace_entry=131,
    trace_exit=132,
    details=_RECORD,
)

# Export cursors and configuration

CLOSE_EXPORT = Operation(
    name="close_export", event_id=8006, trace_entry=13, trace_exit=14
)
EXPORT_CONFIG = Operation(
    name="export_config", event_id=8011, trace_entry=25, trace_exit=26
)
EXPORT_CONFIG_AND_CONFIG_ID = Operation(
    name="export_config_and_config_id",
    event_id=8012,
    trace_entry=23,
    trace_exit=24,
    details={"configID": CannedField(name="export_config_and_config_id_config_id")},
)
EXPORT_CSV_ENTITY_REPORT = Operation(
    name="export_csv_entity_report", event_id=8013, trace_entry=27, trace_exit=28
)
EXPORT_JSON_ENTITY_REPORT = Operation(
    name="export_json_entity_report", event_id=8014, trace_entry=29, trace_exit=30
)
FETCH_NEXT = Operation(name="fetch_next", event_id=8015, trace_entry=31, trace_exit=32)
GET_ACTIVE_CONFIG_ID = Operation(
    name="get_active_config_id", event_id=8034, trace_entry=69, trace_exit=70
)

# Entity, path and network lookup

FIND_INTERESTING_ENTITIES_BY_ENTITY_ID = Operation(
    name="find_interesting_entities_by_entity_id",
    event_id=8016,
    trace_entry=33,
    trace_exit=34,
    details=_ENTITY,
)
FIND_INTERESTING_ENTITIES_BY_RECORD_ID = Operation(
    name="find_interesting_entities_by_record_id",
    event_id=8017,
    trace_entry=35,
    trace_exit=36,
    details=_RECORD_KEY,
)
FIND_NETWORK_BY_ENTITY_ID = Operation(
    name="find_network_by_entity_id",
    event_id=8018,
    trace_entry=37,
    trace_exit=38,
    details={"entityList": "entity_list"},
)
FIND_NETWORK_BY_ENTITY_ID_V2 = Operation(
    name="find_network_by_entity_id_v2",
    event_id=8019,
    trace_entry=39,
    trace_exit=40,
    details={"entityList": "entity_list"},
)
FIND_NETWORK_BY_RECORD_ID = Operation(
    name="find_network_by_record_id",
    event_id=8020,
    trace_entry=41,
    trace_exit=42,
    details={"recordList": "record_list"},
)
FIND_NETWORK_BY_RECORD_ID_V2 = Operation(
    name="find_network_by_record_id_v2",
    event_id=8021,
    trace_entry=43,
    trace_exit=44,
    details={"recordList": "record_list"},
)
FIND_PATH_BY_ENTITY_ID = Operation(
    name="find_path_by_entity_id",
    event_id=8022,
    trace_entry=45,
    trace_exit=46,
    details=_ENTITY_PAIR,
)
FIND_PATH_BY_ENTITY_ID_V2 = Operation(
    name="find_path_by_entity_id_v2",
    event_id=8023,
    trace_entry=47,
    trace_exit=48,
    details=_ENTITY_PAIR,
)
FIND_PATH_BY_RECORD_ID = Operation(
    name="find_path_by_record_id",
    event_id=8024,
    trace_entry=49,
    trace_exit=50,
    details=_RECORD_PAIR,
)
FIND_PATH_BY_RECORD_ID_V2 = Operation(
    name="find_path_by_record_id_v2",
    event_id=8025,
    trace_entry=51,
    trace_exit=52,
    details=_RECORD_PAIR,
)
FIND_PATH_EXCLUDING_BY_ENTITY_ID = Operation(
    name="find_path_excluding_by_entity_id",
    event_id=8026,
    trace_entry=53,
    trace_exit=54,
    details=_ENTITY_PAIR,
)
FIND_PATH_EXCLUDING_BY_ENTITY_ID_V2 = Operation(
    name="find_path_excluding_by_entity_id_v2",
    event_id=8027,
    trace_entry=55,
    trace_exit=56,
    details=_ENTITY_PAIR,
)
FIND_PATH_EXCLUDING_BY_RECORD_ID = Operation(
    name="find_path_excluding_by_record_id",
    event_id=8028,
    trace_entry=57,
    trace_exit=58,
    details=_RECORD_PAIR,
)
FIND_PATH_EXCLUDING_BY_RECORD_ID_V2 = Operation(
    name="find_path_excluding_by_record_id_v2",
    event_id=8029,
    trace_entry=59,
    trace_exit=60,
    details=_RECORD_PAIR,
)
FIND_PATH_INCLUDING_SOURCE_BY_ENTITY_ID = Operation(
    name="find_path_including_source_by_entity_id",
    event_id=8030,
    trace_entry=61,
    trace_exit=62,
    details=_ENTITY_PAIR,
)
FIND_PATH_INCLUDING_SOURCE_BY_ENTITY_ID_V2 = Operation(
    name="find_path_including_source_by_entity_id_v2",
    event_id=8031,
    trace_entry=63,
    trace_exit=64,
    details=_ENTITY_PAIR,
)
FIND_PATH_INCLUDING_SOURCE_BY_RECORD_ID = Operation(
    name="find_path_including_source_by_record_id",
    event_id=8032,
    trace_entry=65,
    trace_exit=66,
    details=_RECORD_PAIR,
)
FIND_PATH_INCLUDING_SOURCE_BY_RECORD_ID_V2 = Operation(
    name="find_path_including_source_by_record_id_v2",
    event_id=8033,
    trace_entry=67,
    trace_exit=68,
    details=_RECORD_PAIR,
)
GET_ENTITY_BY_ENTITY_ID = Operation(
    name="get_entity_by_entity_id",
    event_id=8035,
    trace_entry=71,
    trace_exit=72,
    details=_ENTITY,
)
GET_ENTITY_BY_ENTITY_ID_V2 = Operation(
    name="get_entity_by_entity_id_v2",
    event_id=8036,
    trace_entry=73,
    trace_exit=74,
    details=_ENTITY,
)
GET_ENTITY_BY_RECORD_ID = Operation(
    name="get_entity_by_record_id",
    event_id=8037,
    trace_entry=75,
    trace_exit=76,
    details=_RECORD_KEY,
)
GET_ENTITY_BY_RECORD_ID_V2 = Operation(
    name="get_entity_by_record_id_v2",
    event_id=8038,
    trace_entry=77,
    trace_exit=78,
    details=_RECORD_KEY,
)
GET_RECORD = Operation(
    name="get_record", event_id=8039, trace_entry=83, trace_exit=84, details=_RECORD_KEY
)
GET_RECORD_V2 = Operation(
    name="get_record_v2",
    event_id=8040,
    trace_entry=85,
    trace_exit=86,
    details=_RECORD_KEY,
)
GET_VIRTUAL_ENTITY_BY_RECORD_ID = Operation(
    name="get_virtual_entity_by_record_id",
    event_id=8043,
    trace_entry=91,
    trace_exit=92,
    details={"recordList": "record_list"},
)
GET_VIRTUAL_ENTITY_BY_RECORD_ID_V2 = Operation(
    name="get_virtual_entity_by_record_id_v2",
    event_id=8044,
    trace_entry=93,
    trace_exit=94,
    details={"recordList": "record_list"},
)

# Redo queue and record processing

COUNT_REDO_RECORDS = Operation(
    name="count_redo_records", event_id=8007, trace_entry=15, trace_exit=16
)
GET_REDO_RECORD = Operation(
    name="get_redo_record", event_id=8041, trace_entry=87, trace_exit=88
)
PROCESS = Operation(name="process", event_id=8050, trace_entry=105, trace_exit=106)
PROCESS_REDO_RECORD = Operation(
    name="process_redo_record", event_id=8051, trace_entry=107, trace_exit=108
)
PROCESS_REDO_RECORD_WITH_INFO = Operation(
    name="process_redo_record_with_info", event_id=8052, trace_entry=109, trace_exit=110
)
PROCESS_WITH_INFO = Operation(
    name="process_with_info", event_id=8053, trace_entry=111, trace_exit=112
)
PROCESS_WITH_RESPONSE = Operation(
    name="process_with_response", event_id=8054, trace_entry=113, trace_exit=114
)
PROCESS_WITH_RESPONSE_RESIZE = Operation(
    name="process_with_response_resize", event_id=8055, trace_entry=115, trace_exit=116
)
REEVALUATE_ENTITY = Operation(
    name="reevaluate_entity",
    event_id=8057,
    trace_entry=119,
    trace_exit=120,
    details=_ENTITY,
)
REEVALUATE_ENTITY_WITH_INFO = Operation(
    name="reevaluate_entity_with_info",
    event_id=8058,
    trace_entry=121,
    trace_exit=122,
    details=_ENTITY,
)
REEVALUATE_RECORD = Operation(
    name="reevaluate_record",
    event_id=8059,
    trace_entry=123,
    trace_exit=124,
    details=_RECORD_KEY,
)
REEVALUATE_RECORD_WITH_INFO = Operation(
    name="reevaluate_record_with_info",
    event_id=8060,
    trace_entry=125,
    trace_exit=126,
    details=_RECORD_KEY,
)

# Search and explanation

SEARCH_BY_ATTRIBUTES = Operation(
    name="search_by_attributes", event_id=8064, trace_entry=133, trace_exit=134
)
SEARCH_BY_ATTRIBUTES_V2 = Operation(
    name="search_by_attributes_v2", event_id=8065, trace_entry=135, trace_exit=136
)
HOW_ENTITY_BY_ENTITY_ID = Operation(
    name="how_entity_by_entity_id",
    event_id=8045,
    trace_entry=95,
    trace_exit=96,
    details=_ENTITY,
)
HOW_ENTITY_BY_ENTITY_ID_V2 = Operation(
    name="how_entity_by_entity_id_v2",
    event_id=8046,
    trace_entry=97,
    trace_exit=98,
    details=_ENTITY,
)
WHY_ENTITIES = Operation(
    name="why_entities",
    event_id=8067,
    trace_entry=141,
    trace_exit=142,
    details=_ENTITY_PAIR,
)
WHY_ENTITIES_V2 = Operation(
    name="why_entities_v2",
    event_id=8068,
    trace_entry=143,
    trace_exit=144,
    details=_ENTITY_PAIR,
)
WHY_ENTITY_BY_ENTITY_ID = Operation(
    name="why_entity_by_entity_id",
    event_id=8069,
    trace_entry=145,
    trace_exit=146,
    details=_ENTITY,
)
WHY_ENTITY_BY_ENTITY_ID_V2 = Operation(
    name="why_entity_by_entity_id_v2",
    event_id=8070,
    trace_entry=147,
    trace_exit=148,
    details=_ENTITY,
)
WHY_ENTITY_BY_RECORD_ID = Operation(
    name="why_entity_by_record_id",
    event_id=8071,
    trace_entry=149,
    trace_exit=150,
    details=_RECORD_KEY,
)
WHY_ENTITY_BY_RECORD_ID_V2 = Operation(
    name="why_entity_by_record_id_v2",
    event_id=8072,
    trace_entry=151,
    trace_exit=152,
    details=_RECORD_KEY,
)
WHY_RECORDS = Operation(
    name="why_records",
    event_id=8073,
    trace_entry=153,
    trace_exit=154,
    details=_RECORD_PAIR,
)
WHY_RECORDS_V2 = Operation(
    name="why_records_v2",
    event_id=8074,
    trace_entry=155,
    trace_exit=156,
    details=_RECORD_PAIR,
)

# Lifecycle, statistics and observers

DESTROY = Operation(name="destroy", event_id=8010, trace_entry=21, trace_exit=22)
GET_REPOSITORY_LAST_MODIFIED_TIME = Operation(
    name="get_repository_last_modified_time",
    event_id=8042,
    trace_entry=89,
    trace_exit=90,
)
INIT = Operation(
    name="init", event_id=8047, trace_entry=99, trace_exit=100, details=_INIT
)
INIT_WITH_CONFIG_ID = Operation(
    name="init_with_config_id",
    event_id=8048,
    trace_entry=101,
    trace_exit=102,
    details={**_INIT, "initConfigID": "init_config_id"},
)
PRIME_ENGINE = Operation(
    name="prime_engine", event_id=8049, trace_entry=103, trace_exit=104
)
PURGE_REPOSITORY = Operation(
    name="purge_repository", event_id=8056, trace_entry=117, trace_exit=118
)
REINIT = Operation(
    name="reinit",
    event_id=8061,
    trace_entry=127,
    trace_exit=128,
    details={"initConfigID": "init_config_id"},
)
STATS = Operation(name="stats", event_id=8066, trace_entry=139, trace_exit=140)
GET_SDK_ID = Operation(
    name="get_sdk_id", event_id=8075, trace_entry=161, trace_exit=162
)
REGISTER_OBSERVER = Operation(
    name="register_observer", event_id=8076, trace_entry=157, trace_exit=158
)
SET_LOG_LEVEL = Operation(
    name="set_log_level", event_id=8077, trace_entry=137, trace_exit=138
)
UNREGISTER_OBSERVER = Operation(
    name="unregister_observer", event_id=8078, trace_entry=159, trace_exit=160
)

OPERATIONS: tuple[Operation, ...] = (
    ADD_RECORD,
    ADD_RECORD_WITH_INFO,
    ADD_RECORD_WITH_INFO_WITH_RETURNED_RECORD_ID,
    ADD_RECORD_WITH_RETURNED_RECORD_ID,
    CHECK_RECORD,
    DELETE_RECORD,
    DELETE_RECORD_WITH_INFO,
    REPLACE_RECORD,
    REPLACE_RECORD_WITH_INFO,
    CLOSE_EXPORT,
    EXPORT_CONFIG,
    EXPORT_CONFIG_AND_CONFIG_ID,
    EXPORT_CSV_ENTITY_REPORT,
    EXPORT_JSON_ENTITY_REPORT,
    FETCH_NEXT,
    GET_ACTIVE_CONFIG_ID,
    FIND_INTERESTING_ENTITIES_BY_ENTITY_ID,
    FIND_INTERESTING_ENTITIES_BY_RECORD_ID,
    FIND_NETWORK_BY_ENTITY_ID,
    FIND_NETWORK_BY_ENTITY_ID_V2,
    FIND_NETWORK_BY_RECORD_ID,
    FIND_NETWORK_BY_RECORD_ID_V2,
    FIND_PATH_BY_ENTITY_ID,
    FIND_PATH_BY_ENTITY_ID_V2,
    FIND_PATH_BY_RECORD_ID,
    FIND_PATH_BY_RECORD_ID_V2,
    FIND_PATH_EXCLUDING_BY_ENTITY_ID,
    FIND_PATH_EXCLUDING_BY_ENTITY_ID_V2,
    FIND_PATH_EXCLUDING_BY_RECORD_ID,
    FIND_PATH_EXCLUDING_BY_RECORD_ID_V2,
    FIND_PATH_INCLUDING_SOURCE_BY_ENTITY_ID,
    FIND_PATH_INCLUDING_SOURCE_BY_ENTITY_ID_V2,
    FIND_PATH_INCLUDING_SOURCE_BY_RECORD_ID,
    FIND_PATH_INCLUDING_SOURCE_BY_RECORD_ID_V2,
    GET_ENTITY_BY_ENTITY_ID,
    GET_ENTITY_BY_ENTITY_ID_V2,
    GET_ENTITY_BY_RECORD_ID,
    GET_ENTITY_BY_RECORD_ID_V2,
    GET_RECORD,
    GET_RECORD_V2,
    GET_VIRTUAL_ENTITY_BY_RECORD_ID,
    GET_VIRTUAL_ENTITY_BY_RECORD_ID_V2,
    COUNT_REDO_RECORDS,
    GET_REDO_RECORD,
    PROCESS,
    PROCESS_REDO_RECORD,
    PROCESS_REDO_RECORD_WITH_INFO,
    PROCESS_WITH_INFO,
    PROCESS_WITH_RESPONSE,
    PROCESS_WITH_RESPONSE_RESIZE,
    REEVALUATE_ENTITY,
    REEVALUATE_ENTITY_WITH_INFO,
    REEVALUATE_RECORD,
    REEVALUATE_RECORD_WITH_INFO,
    SEARCH_BY_ATTRIBUTES,
    SEARCH_BY_ATTRIBUTES_V2,
    HOW_ENTITY_BY_ENTITY_ID,
    HOW_ENTITY_BY_ENTITY_ID_V2,
    WHY_ENTITIES,
    WHY_ENTITIES_V2,
    WHY_ENTITY_BY_ENTITY_ID,
    WHY_ENTITY_BY_ENTITY_ID_V2,
    WHY_ENTITY_BY_RECORD_ID,
    WHY_ENTITY_BY_RECORD_ID_V2,
    WHY_RECORDS,
    WHY_RECORDS_V2,
    DESTROY,
    GET_REPOSITORY_LAST_MODIFIED_TIME,
    INIT,
    INIT_WITH_CONFIG_ID,
    PRIME_ENGINE,
    PURGE_REPOSITORY,
    REINIT,
    STATS,
    GET_SDK_ID,
    REGISTER_OBSERVER,
    SET_LOG_LEVEL,
    UNREGISTER_OBSERVER,
)
