"""
Gestao de Template API - Public Storage
Disco publico local para as imagens dos templates, exposto em /storage
"""
import logging
import re
import unicodedata
from pathlib import Path
from typing import Iterable, Optional
from urllib.parse import quote

from app.core.config import settings
from app.core.security import generate_random_string
from app.core.validation import PreparedUpload

logger = logging.getLogger(__name__)

TEMPLATE_ASSETS_DIR = "assets/gestaoTemplate"
PUBLIC_PREFIX = "storage"


def slugify(text: str) -> str:
    """Converte texto em slug ASCII"""
    text = unicodedata.normalize("NFKD", text).encode("ascii", "ignore").decode("ascii")
    text = text.lower().strip()
    text = re.sub(r'[^\w\s-]', '', text)
    text = re.sub(r'[\s_-]+', '-', text)
    return text.strip('-')


def build_filename(original_name: str, extension: str) -> str:
    """nome-original-XXXXXXXXXX.ext"""
    stem = Path(original_name or "").stem
    slug = slugify(stem) or "arquivo"
    return f"{slug}-{generate_random_string(10)}.{extension}"


class PublicStorage:
    """Grava, remove e publica arquivos sob um diretorio raiz"""

    def __init__(self, root: str):
        self.root = Path(root).resolve()

    def _resolve(self, path: str) -> Path:
        full_path = (self.root / path).resolve()
        if self.root not in full_path.parents:
            raise ValueError(f"Caminho fora do disco publico: {path}")
        return full_path

    def exists(self, path: str) -> bool:
        try:
            return self._resolve(path).is_file()
        except ValueError:
            return False

    def save(self, upload: PreparedUpload, store_folder: str, entity_folder: str) -> str:
        """Grava o upload e retorna o caminho relativo ao disco"""
        filename = build_filename(upload.original_name, upload.extension)
        relative_path = f"{store_folder}/{TEMPLATE_ASSETS_DIR}/{entity_folder}/{filename}"

        full_path = self._resolve(relative_path)
        full_path.parent.mkdir(parents=True, exist_ok=True)
        full_path.write_bytes(upload.content)

        logger.info(f"Arquivo gravado: {relative_path}")
        return relative_path

    def delete(self, path: Optional[str]) -> bool:
        """Remove o arquivo; falhas sao apenas registradas"""
        if not path:
            return False
        try:
            full_path = self._resolve(path)
            if full_path.exists():
                full_path.unlink()
                return True
        except (OSError, ValueError) as e:
            logger.warning(f"Falha ao remover arquivo {path}: {e}")
        return False

    def delete_many(self, paths: Iterable[Optional[str]]) -> None:
        for path in paths:
            self.delete(path)

    def public_url(self, path: str, base_url: Optional[str] = None) -> str:
        base = (settings.PUBLIC_URL or base_url or "").rstrip("/")
        return f"{base}/{PUBLIC_PREFIX}/{quote(path)}"


storage = PublicStorage(settings.STORAGE_ROOT)


def get_storage() -> PublicStorage:
    """Dependency do disco publico"""
    return storage
