"""
유틸리티 패키지

메타데이터 태그 변환 등 공통 유틸리티
"""

from core.utils.metadata_tags import metadata_to_tags, tags_to_metadata

__all__ = [
    "metadata_to_tags",
    "tags_to_metadata",
]
