"""
Gestao de Template API - Clima API
Proxy do clima atual via OpenWeatherMap
"""
from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from app.core import settings
from app.services.weather import WeatherClient, WeatherServiceError

router = APIRouter(prefix="/clima", tags=["Clima"])


def get_weather_client() -> WeatherClient:
    """Dependency do cliente de clima"""
    return WeatherClient(
        api_key=settings.OPENWEATHERMAP_API_KEY,
        base_url=settings.OPENWEATHERMAP_URL,
        timeout=settings.WEATHER_TIMEOUT_SECONDS,
    )


@router.get("")
async def obter_clima(
    cidade: str = Query(..., min_length=2),
    client: WeatherClient = Depends(get_weather_client)
):
    """Clima atual da cidade: temperatura, umidade e descricao"""
    try:
        dados = await client.current(cidade)
    except WeatherServiceError as e:
        return JSONResponse(status_code=e.status_code, content=e.body())

    return {"error": False, "dados": dados}
