"""G2EngineMock — engine client returning canned results."""

from g2mock.client.domain.settings import ClientSettings
from g2mock.client.infrastructure.decorator import instrumented
from g2mock.client.infrastructure.instrumentation import ClientInstrumentation
from g2mock.engine.domain.results import EngineResults
from g2mock.engine.infrastructure import operations as ops
from g2mock.messagelog.domain.level import LogLevel
from g2mock.messagelog.domain.logger import MessageLogger
from g2mock.observer.domain.observer import Observer


class G2EngineMock:
    """Satisfies the G2Engine protocol without resolving anything.

    Nothing is matched, stored or searched: each method returns the field
    of ``results`` named after it (or ``None`` for side-effect methods).
    Arguments are only used for tracing and for observer notifications.
    """

    def __init__(
        self,
        results: EngineResults | None = None,
        settings: ClientSettings | None = None,
        logger: MessageLogger | None = None,
    ) -> None:
        self.results = results if results is not None else EngineResults()
        self.instrumentation = ClientInstrumentation(
            component=ops.COMPONENT,
            component_id=ops.COMPONENT_ID,
            settings=settings,
            logger=logger,
        )

    # Record maintenance

    @instrumented(ops.ADD_RECORD)
    async def add_record(
        self, data_source_code: str, record_id: str, json_data: str, load_id: str
    ) -> None:
        return None

    @instrumented(ops.ADD_RECORD_WITH_INFO)
    async def add_record_with_info(
        self,
        data_source_code: str,
        record_id: str,
        json_data: str,
        load_id: str,
        flags: int,
    ) -> str:
        return self.results.add_record_with_info

    @instrumented(ops.ADD_RECORD_WITH_INFO_WITH_RETURNED_RECORD_ID)
    async def add_record_with_info_with_returned_record_id(
        self, data_source_code: str, json_data: str, load_id: str, flags: int
    ) -> tuple[str, str]:
        """Return (with-info document, generated record id)."""
        return (
            self.results.add_record_with_info_with_returned_record_id_with_info,
            self.results.add_record_with_info_with_returned_record_id_record_id,
        )

    @instrumented(ops.ADD_RECORD_WITH_RETURNED_RECORD_ID)
    async def add_record_with_returned_record_id(
        self, data_source_code: str, json_data: str, load_id: str
    ) -> str:
        return self.results.add_record_with_returned_record_id

    @instrumented(ops.CHECK_RECORD)
    async def check_record(self, record: str, record_query_list: str) -> str:
        return self.results.check_record

    @instrumented(ops.DELETE_RECORD)
    async def delete_record(
        self, data_source_code: str, record_id: str, load_id: str
    ) -> None:
        return None

    @instrumented(ops.DELETE_RECORD_WITH_INFO)
    async def delete_record_with_info(
        self, data_source_code: str, record_id: str, load_id: str, flags: int
    ) -> str:
        return self.results.delete_record_with_info

    @instrumented(ops.REPLACE_RECORD)
    async def replace_record(
        self, data_source_code: str, record_id: str, json_data: str, load_id: str
    ) -> None:
        return None

    @instrumented(ops.REPLACE_RECORD_WITH_INFO)
    async def replace_record_with_info(
        self,
        data_source_code: str,
        record_id: str,
        json_data: str,
        load_id: str,
        flags: int,
    ) -> str:
        return self.results.replace_record_with_info

    # Export cursors and configuration

    @instrumented(ops.CLOSE_EXPORT)
    async def close_export(self, response_handle: int) -> None:
        return None

    @instrumented(ops.EXPORT_CONFIG)
    async def export_config(self) -> str:
        return self.results.export_config

    @instrumented(ops.EXPORT_CONFIG_AND_CONFIG_ID)
    async def export_config_and_config_id(self) -> tuple[str, int]:
        """Return (configuration document, configuration id)."""
        return (
            self.results.export_config_and_config_id_config,
            self.results.export_config_and_config_id_config_id,
        )

    @instrumented(ops.EXPORT_CSV_ENTITY_REPORT)
    async def export_csv_entity_report(self, csv_column_list: str, flags: int) -> int:
        """Open a CSV export; returns the handle to pass to fetch_next."""
        return self.results.export_csv_entity_report

    @instrumented(ops.EXPORT_JSON_ENTITY_REPORT)
    async def export_json_entity_report(self, flags: int) -> int:
        """Open a JSON export; returns the handle to pass to fetch_next."""
        return self.results.export_json_entity_report

    @instrumented(ops.FETCH_NEXT)
    async def fetch_next(self, response_handle: int) -> str:
        return self.results.fetch_next

    @instrumented(ops.GET_ACTIVE_CONFIG_ID)
    async def get_active_config_id(self) -> int:
        return self.results.get_active_config_id

    # Entity, path and network lookup

    @instrumented(ops.FIND_INTERESTING_ENTITIES_BY_ENTITY_ID)
    async def find_interesting_entities_by_entity_id(
        self, entity_id: int, flags: int
    ) -> str:
        return self.results.find_interesting_entities_by_entity_id

    @instrumented(ops.FIND_INTERESTING_ENTITIES_BY_RECORD_ID)
    async def find_interesting_entities_by_record_id(
        self, data_source_code: str, record_id: str, flags: int
    ) -> str:
        return self.results.find_interesting_entities_by_record_id

    @instrumented(ops.FIND_NETWORK_BY_ENTITY_ID)
    async def find_network_by_entity_id(
        self,
        entity_list: str,
        max_degree: int,
        build_out_degree: int,
        max_entities: int,
    ) -> str:
        return self.results.find_network_by_entity_id

    @instrumented(ops.FIND_NETWORK_BY_ENTITY_ID_V2)
    async def find_network_by_entity_id_v2(
        self,
        entity_list: str,
        max_degree: int,
        build_out_degree: int,
        max_entities: int,
        flags: int,
    ) -> str:
        return self.results.find_network_by_entity_id_v2

    @instrumented(ops.FIND_NETWORK_BY_RECORD_ID)
    async def find_network_by_record_id(
        self,
        record_list: str,
        max_degree: int,
        build_out_degree: int,
        max_entities: int,
    ) -> str:
        return self.results.find_network_by_record_id

    @instrumented(ops.FIND_NETWORK_BY_RECORD_ID_V2)
    async def find_network_by_record_id_v2(
        self,
        record_list: str,
        max_degree: int,
        build_out_degree: int,
        max_entities: int,
        flags: int,
    ) -> str:
        return self.results.find_network_by_record_id_v2

    @instrumented(ops.FIND_PATH_BY_ENTITY_ID)
    async def find_path_by_entity_id(
        self, entity_id1: int, entity_id2: int, max_degree: int
    ) -> str:
        return self.results.find_path_by_entity_id

    @instrumented(ops.FIND_PATH_BY_ENTITY_ID_V2)
    async def find_path_by_entity_id_v2(
        self, entity_id1: int, entity_id2: int, max_degree: int, flags: int
    ) -> str:
        return self.results.find_path_by_entity_id_v2

    @instrumented(ops.FIND_PATH_BY_RECORD_ID)
    async def find_path_by_record_id(
        self,
        data_source_code1: str,
        record_id1: str,
        data_source_code2: str,
        record_id2: str,
        max_degree: int,
    ) -> str:
        return self.results.find_path_by_record_id

    @instrumented(ops.FIND_PATH_BY_RECORD_ID_V2)
    async def find_path_by_record_id_v2(
        self,
        data_source_code1: str,
        record_id1: str,
        data_source_code2: str,
        record_id2: str,
        max_degree: int,
        flags: int,
    ) -> str:
        return self.results.find_path_by_record_id_v2

    @instrumented(ops.FIND_PATH_EXCLUDING_BY_ENTITY_ID)
    async def find_path_excluding_by_entity_id(
        self, entity_id1: int, entity_id2: int, max_degree: int, excluded_entities: str
    ) -> str:
        return self.results.find_path_excluding_by_entity_id

    @instrumented(ops.FIND_PATH_EXCLUDING_BY_ENTITY_ID_V2)
    async def find_path_excluding_by_entity_id_v2(
        self,
        entity_id1: int,
        entity_id2: int,
        max_degree: int,
        excluded_entities: str,
        flags: int,
    ) -> str:
        return self.results.find_path_excluding_by_entity_id_v2

    @instrumented(ops.FIND_PATH_EXCLUDING_BY_RECORD_ID)
    async def find_path_excluding_by_record_id(
        self,
        data_source_code1: str,
        record_id1: str,
        data_source_code2: str,
        record_id2: str,
        max_degree: int,
        excluded_records: str,
    ) -> str:
        return self.results.find_path_excluding_by_record_id

    @instrumented(ops.FIND_PATH_EXCLUDING_BY_RECORD_ID_V2)
    async def find_path_excluding_by_record_id_v2(
        self,
        data_source_code1: str,
        record_id1: str,
        data_source_code2: str,
        record_id2: str,
        max_degree: int,
        excluded_records: str,
        flags: int,
    ) -> str:
        return self.results.find_path_excluding_by_record_id_v2

    @instrumented(ops.FIND_PATH_INCLUDING_SOURCE_BY_ENTITY_ID)
    async def find_path_including_source_by_entity_id(
        self,
        entity_id1: int,
        entity_id2: int,
        max_degree: int,
        excluded_entities: str,
        required_dsrcs: str,
    ) -> str:
        return self.results.find_path_including_source_by_entity_id

    @instrumented(ops.FIND_PATH_INCLUDING_SOURCE_BY_ENTITY_ID_V2)
    async def find_path_including_source_by_entity_id_v2(
        self,
        entity_id1: int,
        entity_id2: int,
        max_degree: int,
        excluded_entities: str,
        required_dsrcs: str,
        flags: int,
    ) -> str:
        return self.results.find_path_including_source_by_entity_id_v2

    @instrumented(ops.FIND_PATH_INCLUDING_SOURCE_BY_RECORD_ID)
    async def find_path_including_source_by_record_id(
        self,
        data_source_code1: str,
        record_id1: str,
        data_source_code2: str,
        record_id2: str,
        max_degree: int,
        excluded_records: str,
        required_dsrcs: str,
    ) -> str:
        return self.results.find_path_including_source_by_record_id

    @instrumented(ops.FIND_PATH_INCLUDING_SOURCE_BY_RECORD_ID_V2)
    async def find_path_including_source_by_record_id_v2(
        self,
        data_source_code1: str,
        record_id1: str,
        data_source_code2: str,
        record_id2: str,
        max_degree: int,
        excluded_records: str,
        required_dsrcs: str,
        flags: int,
    ) -> str:
        return self.results.find_path_including_source_by_record_id_v2

    @instrumented(ops.GET_ENTITY_BY_ENTITY_ID)
    async def get_entity_by_entity_id(self, entity_id: int) -> str:
        return self.results.get_entity_by_entity_id

    @instrumented(ops.GET_ENTITY_BY_ENTITY_ID_V2)
    async def get_entity_by_entity_id_v2(self, entity_id: int, flags: int) -> str:
        return self.results.get_entity_by_entity_id_v2

    @instrumented(ops.GET_ENTITY_BY_RECORD_ID)
    async def get_entity_by_record_id(
        self, data_source_code: str, record_id: str
    ) -> str:
        return self.results.get_entity_by_record_id

    @instrumented(ops.GET_ENTITY_BY_RECORD_ID_V2)
    async def get_entity_by_record_id_v2(
        self, data_source_code: str, record_id: str, flags: int
    ) -> str:
        return self.results.get_entity_by_record_id_v2

    @instrumented(ops.GET_RECORD)
    async def get_record(self, data_source_code: str, record_id: str) -> str:
        return self.results.get_record

    @instrumented(ops.GET_RECORD_V2)
    async def get_record_v2(
        self, data_source_code: str, record_id: str, flags: int
    ) -> str:
        return self.results.get_record_v2

    @instrumented(ops.GET_VIRTUAL_ENTITY_BY_RECORD_ID)
    async def get_virtual_entity_by_record_id(self, record_list: str) -> str:
        return self.results.get_virtual_entity_by_record_id

    @instrumented(ops.GET_VIRTUAL_ENTITY_BY_RECORD_ID_V2)
    async def get_virtual_entity_by_record_id_v2(
        self, record_list: str, flags: int
    ) -> str:
        return self.results.get_virtual_entity_by_record_id_v2

    # Redo queue and record processing

    @instrumented(ops.COUNT_REDO_RECORDS)
    async def count_redo_records(self) -> int:
        return self.results.count_redo_records

    @instrumented(ops.GET_REDO_RECORD)
    async def get_redo_record(self) -> str:
        return self.results.get_redo_record

    @instrumented(ops.PROCESS)
    async def process(self, record: str) -> None:
        return None

    @instrumented(ops.PROCESS_REDO_RECORD)
    async def process_redo_record(self) -> str:
        return self.results.process_redo_record

    @instrumented(ops.PROCESS_REDO_RECORD_WITH_INFO)
    async def process_redo_record_with_info(self, flags: int) -> tuple[str, str]:
        """Return (processed redo record, with-info document)."""
        return (
            self.results.process_redo_record_with_info,
            self.results.process_redo_record_with_info_with_info,
        )

    @instrumented(ops.PROCESS_WITH_INFO)
    async def process_with_info(self, record: str, flags: int) -> str:
        return self.results.process_with_info

    @instrumented(ops.PROCESS_WITH_RESPONSE)
    async def process_with_response(self, record: str) -> str:
        return self.results.process_with_response

    @instrumented(ops.PROCESS_WITH_RESPONSE_RESIZE)
    async def process_with_response_resize(self, record: str) -> str:
        return self.results.process_with_response_resize

    @instrumented(ops.REEVALUATE_ENTITY)
    async def reevaluate_entity(self, entity_id: int, flags: int) -> None:
        return None

    @instrumented(ops.REEVALUATE_ENTITY_WITH_INFO)
    async def reevaluate_entity_with_info(self, entity_id: int, flags: int) -> str:
        return self.results.reevaluate_entity_with_info

    @instrumented(ops.REEVALUATE_RECORD)
    async def reevaluate_record(
        self, data_source_code: str, record_id: str, flags: int
    ) -> None:
        return None

    @instrumented(ops.REEVALUATE_RECORD_WITH_INFO)
    async def reevaluate_record_with_info(
        self, data_source_code: str, record_id: str, flags: int
    ) -> str:
        return self.results.reevaluate_record_with_info

    # Search and explanation

    @instrumented(ops.SEARCH_BY_ATTRIBUTES)
    async def search_by_attributes(self, json_data: str) -> str:
        return self.results.search_by_attributes

    @instrumented(ops.SEARCH_BY_ATTRIBUTES_V2)
    async def search_by_attributes_v2(self, json_data: str, flags: int) -> str:
        return self.results.search_by_attributes_v2

    @instrumented(ops.HOW_ENTITY_BY_ENTITY_ID)
    async def how_entity_by_entity_id(self, entity_id: int) -> str:
        return self.results.how_entity_by_entity_id

    @instrumented(ops.HOW_ENTITY_BY_ENTITY_ID_V2)
    async def how_entity_by_entity_id_v2(self, entity_id: int, flags: int) -> str:
        return self.results.how_entity_by_entity_id_v2

    @instrumented(ops.WHY_ENTITIES)
    async def why_entities(self, entity_id1: int, entity_id2: int) -> str:
        return self.results.why_entities

    @instrumented(ops.WHY_ENTITIES_V2)
    async def why_entities_v2(
        self, entity_id1: int, entity_id2: int, flags: int
    ) -> str:
        return self.results.why_entities_v2

    @instrumented(ops.WHY_ENTITY_BY_ENTITY_ID)
    async def why_entity_by_entity_id(self, entity_id: int) -> str:
        return self.results.why_entity_by_entity_id

    @instrumented(ops.WHY_ENTITY_BY_ENTITY_ID_V2)
    async def why_entity_by_entity_id_v2(self, entity_id: int, flags: int) -> str:
        return self.results.why_entity_by_entity_id_v2

    @instrumented(ops.WHY_ENTITY_BY_RECORD_ID)
    async def why_entity_by_record_id(
        self, data_source_code: str, record_id: str
    ) -> str:
        return self.results.why_entity_by_record_id

    @instrumented(ops.WHY_ENTITY_BY_RECORD_ID_V2)
    async def why_entity_by_record_id_v2(
        self, data_source_code: str, record_id: str, flags: int
    ) -> str:
        return self.results.why_entity_by_record_id_v2

    @instrumented(ops.WHY_RECORDS)
    async def why_records(
        self,
        data_source_code1: str,
        record_id1: str,
        data_source_code2: str,
        record_id2: str,
    ) -> str:
        return self.results.why_records

    @instrumented(ops.WHY_RECORDS_V2)
    async def why_records_v2(
        self,
        data_source_code1: str,
        record_id1: str,
        data_source_code2: str,
        record_id2: str,
        flags: int,
    ) -> str:
        return self.results.why_records_v2

    # Lifecycle, statistics and observers

    @instrumented(ops.DESTROY)
    async def destroy(self) -> None:
        return None

    @instrumented(ops.GET_REPOSITORY_LAST_MODIFIED_TIME)
    async def get_repository_last_modified_time(self) -> int:
        return self.results.get_repository_last_modified_time

    @instrumented(ops.GET_SDK_ID)
    async def get_sdk_id(self) -> str:
        return "mock"

    @instrumented(ops.INIT)
    async def init(
        self, module_name: str, ini_params: str, verbose_logging: int
    ) -> None:
        return None

    @instrumented(ops.INIT_WITH_CONFIG_ID)
    async def init_with_config_id(
        self,
        module_name: str,
        ini_params: str,
        init_config_id: int,
        verbose_logging: int,
    ) -> None:
        return None

    @instrumented(ops.PRIME_ENGINE)
    async def prime_engine(self) -> None:
        return None

    @instrumented(ops.PURGE_REPOSITORY)
    async def purge_repository(self) -> None:
        return None

    @instrumented(ops.REINIT)
    async def reinit(self, init_config_id: int) -> None:
        return None

    @instrumented(ops.STATS)
    async def stats(self) -> str:
        return self.results.stats

    async def register_observer(self, observer: Observer) -> None:
        self.instrumentation.register_observer(ops.REGISTER_OBSERVER, observer)

    async def unregister_observer(self, observer: Observer) -> None:
        self.instrumentation.unregister_observer(ops.UNREGISTER_OBSERVER, observer)

    async def set_log_level(self, log_level: LogLevel | str) -> None:
        self.instrumentation.set_log_level(ops.SET_LOG_LEVEL, log_level)

    def has_observers(self) -> bool:
        return self.instrumentation.has_observers()
