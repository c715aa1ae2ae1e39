"""G2Engine Protocol — capability interface of the entity resolution engine client."""

from typing import Protocol

from g2mock.messagelog.domain.level import LogLevel
from g2mock.observer.domain.observer import Observer


class G2Engine(Protocol):
    """Structural interface satisfied by any engine client.

    Records are addressed by (data source code, record id); entities by
    their numeric entity id. JSON documents travel as strings and flags as
    integer bit masks. The ``_v2`` variants take an extra ``flags`` argument
    that controls the shape of the returned document.
    """

    # Record maintenance

    async def add_record(
        self, data_source_code: str, record_id: str, json_data: str, load_id: str
    ) -> None: ...

    async def add_record_with_info(
        self,
        data_source_code: str,
        record_id: str,
        json_data: str,
        load_id: str,
        flags: int,
    ) -> str: ...

    async def add_record_with_info_with_returned_record_id(
        self, data_source_code: str, json_data: str, load_id: str, flags: int
    ) -> tuple[str, str]: ...

    async def add_record_with_returned_record_id(
        self, data_source_code: str, json_data: str, load_id: str
    ) -> str: ...

    async def check_record(self, record: str, record_query_list: str) -> str: ...

    async def delete_record(
        self, data_source_code: str, record_id: str, load_id: str
    ) -> None: ...

    async def delete_record_with_info(
        self, data_source_code: str, record_id: str, load_id: str, flags: int
    ) -> str: ...

    async def replace_record(
        self, data_source_code: str, record_id: str, json_data: str, load_id: str
    ) -> None: ...

    async def replace_record_with_info(
        self,
        data_source_code: str,
        record_id: str,
        json_data: str,
        load_id: str,
        flags: int,
    ) -> str: ...

    # Export cursors and configuration

    async def close_export(self, response_handle: int) -> None: ...

    async def export_config(self) -> str: ...

    async def export_config_and_config_id(self) -> tuple[str, int]: ...

    async def export_csv_entity_report(
        self, csv_column_list: str, flags: int
    ) -> int: ...

    async def export_json_entity_report(self, flags: int) -> int: ...

    async def fetch_next(self, response_handle: int) -> str: ...

    async def get_active_config_id(self) -> int: ...

    # Entity, path and network lookup

    async def find_interesting_entities_by_entity_id(
        self, entity_id: int, flags: int
    ) -> str: ...

    async def find_interesting_entities_by_record_id(
        self, data_source_code: str, record_id: str, flags: int
    ) -> str: ...

    async def find_network_by_entity_id(
        self,
        entity_list: str,
        max_degree: int,
        build_out_degree: int,
        max_entities: int,
    ) -> str: ...

    async def find_network_by_entity_id_v2(
        self,
        entity_list: str,
        max_degree: int,
        build_out_degree: int,
        max_entities: int,
        flags: int,
    ) -> str: ...

    async def find_network_by_record_id(
        self,
        record_list: str,
        max_degree: int,
        build_out_degree: int,
        max_entities: int,
    ) -> str: ...

    async def find_network_by_record_id_v2(
        self,
        record_list: str,
        max_degree: int,
        build_out_degree: int,
        max_entities: int,
        flags: int,
    ) -> str: ...

    async def find_path_by_entity_id(
        self, entity_id1: int, entity_id2: int, max_degree: int
    ) -> str: ...

    async def find_path_by_entity_id_v2(
        self, entity_id1: int, entity_id2: int, max_degree: int, flags: int
    ) -> str: ...

    async def find_path_by_record_id(
        self,
        data_source_code1: str,
        record_id1: str,
        data_source_code2: str,
        record_id2: str,
        max_degree: int,
    ) -> str: ...

    async def find_path_by_record_id_v2(
        self,
        data_source_code1: str,
        record_id1: str,
        data_source_code2: str,
        record_id2: str,
        max_degree: int,
        flags: int,
    ) -> str: ...

    async def find_path_excluding_by_entity_id(
        self, entity_id1: int, entity_id2: int, max_degree: int, excluded_entities: str
    ) -> str: ...

    async def find_path_excluding_by_entity_id_v2(
        self,
        entity_id1: int,
        entity_id2: int,
        max_degree: int,
        excluded_entities: str,
        flags: int,
    ) -> str: ...

    async def find_path_excluding_by_record_id(
        self,
        data_source_code1: str,
        record_id1: str,
        data_source_code2: str,
        record_id2: str,
        max_degree: int,
        excluded_records: str,
    ) -> str: ...

    async def find_path_excluding_by_record_id_v2(
        self,
        data_source_code1: str,
        record_id1: str,
        data_source_code2: str,
        record_id2: str,
        max_degree: int,
        excluded_records: str,
        flags: int,
    ) -> str: ...

    async def find_path_including_source_by_entity_id(
        self,
        entity_id1: int,
        entity_id2: int,
        max_degree: int,
        excluded_entities: str,
        required_dsrcs: str,
    ) -> str: ...

    async def find_path_including_source_by_entity_id_v2(
        self,
        entity_id1: int,
        entity_id2: int,
        max_degree: int,
        excluded_entities: str,
        required_dsrcs: str,
        flags: int,
    ) -> str: ...

    async def find_path_including_source_by_record_id(
        self,
        data_source_code1: str,
        record_id1: str,
        data_source_code2: str,
        record_id2: str,
        max_degree: int,
        excluded_records: str,
        required_dsrcs: str,
    ) -> str: ...

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
    ) -> str: ...

    async def get_entity_by_entity_id(self, entity_id: int) -> str: ...

    async def get_entity_by_entity_id_v2(self, entity_id: int, flags: int) -> str: ...

    async def get_entity_by_record_id(
        self, data_source_code: str, record_id: str
    ) -> str: ...

    async def get_entity_by_record_id_v2(
        self, data_source_code: str, record_id: str, flags: int
    ) -> str: ...

    async def get_record(self, data_source_code: str, record_id: str) -> str: ...

    async def get_record_v2(
        self, data_source_code: str, record_id: str, flags: int
    ) -> str: ...

    async def get_virtual_entity_by_record_id(self, record_list: str) -> str: ...

    async def get_virtual_entity_by_record_id_v2(
        self, record_list: str, flags: int
    ) -> str: ...

    # Redo queue and record processing

    async def count_redo_records(self) -> int: ...

    async def get_redo_record(self) -> str: ...

    async def process(self, record: str) -> None: ...

    async def process_redo_record(self) -> str: ...

    async def process_redo_record_with_info(self, flags: int) -> tuple[str, str]: ...

    async def process_with_info(self, record: str, flags: int) -> str: ...

    async def process_with_response(self, record: str) -> str: ...

    async def process_with_response_resize(self, record: str) -> str: ...

    async def reevaluate_entity(self, entity_id: int, flags: int) -> None: ...

    async def reevaluate_entity_with_info(self, entity_id: int, flags: int) -> str: ...

    async def reevaluate_record(
        self, data_source_code: str, record_id: str, flags: int
    ) -> None: ...

    async def reevaluate_record_with_info(
        self, data_source_code: str, record_id: str, flags: int
    ) -> str: ...

    # Search and explanation

    async def search_by_attributes(self, json_data: str) -> str: ...

    async def search_by_attributes_v2(self, json_data: str, flags: int) -> str: ...

    async def how_entity_by_entity_id(self, entity_id: int) -> str: ...

    async def how_entity_by_entity_id_v2(self, entity_id: int, flags: int) -> str: ...

    async def why_entities(self, entity_id1: int, entity_id2: int) -> str: ...

    async def why_entities_v2(
        self, entity_id1: int, entity_id2: int, flags: int
    ) -> str: ...

    async def why_entity_by_entity_id(self, entity_id: int) -> str: ...

    async def why_entity_by_entity_id_v2(self, entity_id: int, flags: int) -> str: ...

    async def why_entity_by_record_id(
        self, data_source_code: str, record_id: str
    ) -> str: ...

    async def why_entity_by_record_id_v2(
        self, data_source_code: str, record_id: str, flags: int
    ) -> str: ...

    async def why_records(
        self,
        data_source_code1: str,
        record_id1: str,
        data_source_code2: str,
        record_id2: str,
    ) -> str: ...

    async def why_records_v2(
        self,
        data_source_code1: str,
        record_id1: str,
        data_source_code2: str,
        record_id2: str,
        flags: int,
    ) -> str: ...

    # Lifecycle, statistics and observers

    async def destroy(self) -> None: ...

    async def get_repository_last_modified_time(self) -> int: ...

    async def get_sdk_id(self) -> str: ...

    async def init(
        self, module_name: str, ini_params: str, verbose_logging: int
    ) -> None: ...

    async def init_with_config_id(
        self,
        module_name: str,
        ini_params: str,
        init_config_id: int,
        verbose_logging: int,
    ) -> None: ...

    async def prime_engine(self) -> None: ...

    async def purge_repository(self) -> None: ...

    async def reinit(self, init_config_id: int) -> None: ...

    async def stats(self) -> str: ...

    async def register_observer(self, observer: Observer) -> None: ...

    async def set_log_level(self, log_level: LogLevel | str) -> None: ...

    async def unregister_observer(self, observer: Observer) -> None: ...
