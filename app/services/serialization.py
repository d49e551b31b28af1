"""
Gestao de Template API - Serialization
Converte registros em dicts de resposta, trocando os caminhos de arquivo por URLs publicas
"""
from decimal import Decimal
from typing import Any, Iterable, Optional

from app.core.storage import PublicStorage
from app.core.validation import UploadRule


def serialize_record(record: Any, files: Iterable[UploadRule], storage: PublicStorage,
                     base_url: Optional[str] = None) -> dict:
    data = record.to_dict()

    for rule in files:
        path = data.get(rule.path_attr)
        if path:
            data[rule.path_attr] = storage.public_url(path, base_url)

    for key, value in data.items():
        if isinstance(value, Decimal):
            data[key] = float(value)

    return data
