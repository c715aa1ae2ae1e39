"""EngineResults — canned results returned by the engine mock."""

from pydantic import BaseModel, ConfigDict


class EngineResults(BaseModel):
    """One writable field per data-returning operation, named after it.

    Operations returning two values have one field per value, suffixed with
    the value's name. Export handles are opaque integers.
    """

    model_config = ConfigDict(validate_assignment=True, strict=True, extra="forbid")

    add_record_with_info: str = ""
    add_record_with_info_with_returned_record_id_with_info: str = ""
    add_record_with_info_with_returned_record_id_record_id: str = ""
    add_record_with_returned_record_id: str = ""
    check_record: str = ""
    count_redo_records: int = 0
    delete_record_with_info: str = ""
    export_config: str = ""
    export_config_and_config_id_config: str = ""
    export_config_and_config_id_config_id: int = 0
    export_csv_entity_report: int = 0
    export_json_entity_report: int = 0
    fetch_next: str = ""
    find_interesting_entities_by_entity_id: str = ""
    find_interesting_entities_by_record_id: str = ""
    find_network_by_entity_id: str = ""
    find_network_by_entity_id_v2: str = ""
    find_network_by_record_id: str = ""
    find_network_by_record_id_v2: str = ""
    find_path_by_entity_id: str = ""
    find_path_by_entity_id_v2: str = ""
    find_path_by_record_id: str = ""
    find_path_by_record_id_v2: str = ""
    find_path_excluding_by_entity_id: str = ""
    find_path_excluding_by_entity_id_v2: str = ""
    find_path_excluding_by_record_id: str = ""
    find_path_excluding_by_record_id_v2: str = ""
    find_path_including_source_by_entity_id: str = ""
    find_path_including_source_by_entity_id_v2: str = ""
    find_path_including_source_by_record_id: str = ""
    find_path_including_source_by_record_id_v2: str = ""
    get_active_config_id: int = 0
    get_entity_by_entity_id: str = ""
    get_entity_by_entity_id_v2: str = ""
    get_entity_by_record_id: str = ""
    get_entity_by_record_id_v2: str = ""
    get_record: str = ""
    get_record_v2: str = ""
    get_redo_record: str = ""
    get_repository_last_modified_time: int = 0
    get_virtual_entity_by_record_id: str = ""
    get_virtual_entity_by_record_id_v2: str = ""
    how_entity_by_entity_id: str = ""
    how_entity_by_entity_id_v2: str = ""
    process_redo_record: str = ""
    process_redo_record_with_info: str = ""
    process_redo_record_with_info_with_info: str = ""
    process_with_info: str = ""
    process_with_response: str = ""
    process_with_response_resize: str = ""
    reevaluate_entity_with_info: str = ""
    reevaluate_record_with_info: str = ""
    replace_record_with_info: str = ""
    search_by_attributes: str = ""
    search_by_attributes_v2: str = ""
    stats: str = ""
    why_entities: str = ""
    why_entities_v2: str = ""
    why_entity_by_entity_id: str = ""
    why_entity_by_entity_id_v2: str = ""
    why_entity_by_record_id: str = ""
    why_entity_by_record_id_v2: str = ""
    why_records: str = ""
    why_records_v2: str = ""
