"""Cliente HTTP do serviço de geocodificação compatível com Nominatim."""
from __future__ import annotations

import logging

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from georisk.domain import (
    DecodeError,
    EmptyAddressError,
    GeoCoordinate,
    Geocoder,
    NoResultError,
    TransportError,
)

DEFAULT_GEOCODER_URL = "https://nominatim.openstreetmap.org/search"
DEFAULT_USER_AGENT = "GeoRisk Scraper Project (georisk@example.com)"
DEFAULT_TIMEOUT = 10.0


class NominatimPlace(BaseModel):
    """Item da lista devolvida pela busca do Nominatim."""

    lat: str
    lon: str
    display_name: str | None = None


_PLACES_ADAPTER = TypeAdapter(list[NominatimPlace])


class NominatimGeocoder(Geocoder):
    """Resolve endereços com uma única requisição ``GET`` por chamada.

    O serviço exige um ``User-Agent`` que identifique o cliente e no máximo
    uma requisição por segundo; o intervalo entre chamadas é responsabilidade
    de quem usa esta classe.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_GEOCODER_URL,
        *,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = DEFAULT_TIMEOUT,
        client: httpx.Client | None = None,
        strict_coordinates: bool = False,
    ) -> None:
        """Configura o cliente HTTP usado nas consultas.

        Parameters
        ----------
        base_url:
            Endpoint de busca do serviço.
        user_agent:
            Identificação exigida pela política de uso do serviço.
        timeout:
            Tempo limite por requisição quando o cliente interno é criado.
        client:
            Cliente HTTP opcional, usado principalmente em testes.
        strict_coordinates:
            Quando ``True``, latitude ou longitude não numéricas geram
            ``DecodeError`` em vez de virarem ``0.0``.
        """

        self._base_url = base_url
        self._user_agent = user_agent
        self._client: httpx.Client = client or httpx.Client(timeout=timeout)
        self._owns_client: bool = client is None
        self._strict_coordinates = strict_coordinates
        self._log = logging.getLogger("georisk.geocoder")

    def geocode(self, address: str) -> GeoCoordinate:
        if not address or not address.strip():
            raise EmptyAddressError("endereço vazio")

        try:
            response = self._client.get(
                self._base_url,
                params={"format": "json", "q": address},
                headers={"User-Agent": self._user_agent},
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            self._log.debug("Corpo da resposta com erro: %s", exc.response.text)
            raise TransportError(
                f"serviço de geocodificação respondeu {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            raise TransportError(f"falha ao consultar geocodificação: {exc}") from exc

        body = response.text
        try:
            places = _PLACES_ADAPTER.validate_json(body)
        except ValidationError as exc:
            self._log.error(
                "Erro ao decodificar JSON. Corpo da resposta recebida: %s", body
            )
            raise DecodeError(
                f"resposta de geocodificação inválida: {exc.error_count()} erro(s)",
                body=body,
            ) from exc

        if not places:
            raise NoResultError("nenhum resultado encontrado para o endereço")

        first = places[0]
        return GeoCoordinate(
            latitude=self._parse_coordinate(first.lat, "lat", body),
            longitude=self._parse_coordinate(first.lon, "lon", body),
        )

    def _parse_coordinate(self, value: str, field: str, body: str) -> float:
        # Valores não numéricos viram 0.0 fora do modo estrito.
        try:
            return float(value)
        except ValueError:
            if self._strict_coordinates:
                raise DecodeError(
                    f"campo '{field}' não numérico: {value!r}", body=body
                ) from None
            self._log.warning(
                "campo '%s' não numérico (%r); usando 0.0", field, value
            )
            return 0.0

    def close(self) -> None:
        if self._owns_client:
            self._client.close()


__all__ = [
    "DEFAULT_GEOCODER_URL",
    "DEFAULT_TIMEOUT",
    "DEFAULT_USER_AGENT",
    "NominatimGeocoder",
    "NominatimPlace",
]
