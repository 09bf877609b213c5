"""
메타데이터 태그 유틸리티

태그는 metadata의 "tags" 키에 콤마 구분 문자열로 저장하는 규칙.
예: {"tags": "payment,recurring"} ↔ ["payment", "recurring"]
"""

from typing import Any

from core.constants import Defaults


def metadata_to_tags(metadata: dict[str, Any] | None) -> list[str] | None:
    """metadata에서 태그 목록 추출

    Returns:
        태그 목록 (공백 제거, 빈 태그 제외). tags 키가 없거나 문자열이 아니면 None
    """
    if metadata is None:
        return None

    tags_value = metadata.get(Defaults.METADATA_TAGS_KEY)
    if not isinstance(tags_value, str):
        return None

    return [tag.strip() for tag in tags_value.split(",") if tag.strip()]


def tags_to_metadata(
    metadata: dict[str, Any] | None,
    tags: list[str],
) -> dict[str, Any] | None:
    """태그를 metadata에 추가한 새 딕셔너리 반환

    원본 metadata는 변경하지 않음. 태그가 비어 있으면 원본 그대로 반환.
    """
    if not tags:
        return metadata

    clean_tags = [tag.strip() for tag in tags if tag.strip()]

    result = dict(metadata) if metadata is not None else {}
    result[Defaults.METADATA_TAGS_KEY] = ",".join(clean_tags)
    return result
