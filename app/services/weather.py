"""
Gestao de Template API - Weather Service
Consulta o clima atual de uma cidade na OpenWeatherMap
"""
import logging
from typing import Optional

import httpx

logger = logging.getLogger(__name__)


class WeatherServiceError(Exception):
    """Falha ao consultar o clima; carrega o status HTTP da resposta"""

    def __init__(self, status_code: int, mensagem: str, include_status: bool = True):
        self.status_code = status_code
        self.mensagem = mensagem
        self.include_status = include_status
        super().__init__(mensagem)

    def body(self) -> dict:
        body = {"error": True, "mensagem": self.mensagem}
        if self.include_status:
            body["status_code"] = self.status_code
        return body


class WeatherClient:
    def __init__(
        self,
        api_key: Optional[str],
        base_url: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.base_url = base_url
        self.timeout = timeout
        self.transport = transport

    async def current(self, cidade: str) -> dict:
        """
        Retorna {cidade, temperatura, umidade, descricao}.
        Levanta WeatherServiceError quando a chave falta, a API responde
        com erro ou a resposta nao pode ser lida.
        """
        if not self.api_key:
            raise WeatherServiceError(500, "Chave da API não configurada.", include_status=False)

        params = {
            "q": cidade,
            "appid": self.api_key,
            "units": "metric",
            "lang": "pt_br",
        }

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.get(self.base_url, params=params)
        except httpx.HTTPError as e:
            logger.warning(f"OpenWeatherMap indisponivel: {e}")
            raise WeatherServiceError(502, "Erro da API: Falha ao obter dados climáticos")

        if response.is_error:
            mensagem = self._error_message(response)
            logger.warning(f"OpenWeatherMap respondeu {response.status_code}: {mensagem}")
            raise WeatherServiceError(response.status_code, f"Erro da API: {mensagem}")

        try:
            dados = response.json()
            return {
                "cidade": dados["name"],
                "temperatura": dados["main"]["temp"],
                "umidade": dados["main"]["humidity"],
                "descricao": dados["weather"][0]["description"],
            }
        except (ValueError, KeyError, IndexError, TypeError) as e:
            logger.warning(f"Resposta invalida da OpenWeatherMap: {e}")
            raise WeatherServiceError(502, "Erro da API: Resposta inválida")

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            return response.json().get("message") or "Falha ao obter dados climáticos"
        except (ValueError, AttributeError):
            return "Falha ao obter dados climáticos"
