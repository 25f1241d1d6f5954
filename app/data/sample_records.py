"""Sample drones and ducks loaded into an empty database.

Ducks are kept as compact rows and expanded into storage-flat dicts by
``sample_ducks()``; their superpowers are looked up in the catalog so the
two never drift apart.
"""

from typing import Any, Optional

from app.data.superpowers import get_superpower
from app.models.drone import DroneStatus
from app.models.duck import HibernationStatus

_DJI = ("DJI", "DJI Technology Co. Ltd.", "China")
_AUTEL = ("Autel", "Autel Robotics", "USA")
_PARROT = ("Parrot", "Parrot SA", "França")
_SKYDIO = ("Skydio", "Skydio Inc.", "USA")

# serial, maker, model, status, notes
_DRONE_ROWS: list[tuple[str, tuple[str, str, str], str, DroneStatus, str]] = [
    ("DR-2024-001", _DJI, "Phantom 4 Pro", DroneStatus.active,
     "High-performance aerial photography drone with 4K camera"),
    ("DR-2024-002", _DJI, "Mavic 3", DroneStatus.active,
     "Foldable pro drone with Hasselblad camera"),
    ("DR-2024-003", _AUTEL, "EVO II Pro", DroneStatus.active,
     "Enterprise-grade drone with 6K camera"),
    ("DR-2024-004", _AUTEL, "EVO Nano+", DroneStatus.inactive,
     "Lightweight consumer drone"),
    ("DR-2024-005", _PARROT, "Anafi AI", DroneStatus.active,
     "AI-powered inspection drone"),
    ("DR-2024-006", _PARROT, "Anafi", DroneStatus.maintenance,
     "4K HDR camera drone"),
    ("DR-2024-007", _SKYDIO, "X2", DroneStatus.active,
     "Autonomous enterprise drone with obstacle avoidance"),
    ("DR-2024-008", _DJI, "Mini 3 Pro", DroneStatus.active,
     "Ultra-lightweight pro drone under 250g"),
    ("DR-2024-009", _AUTEL, "EVO Lite+", DroneStatus.active,
     "Entry-level prosumer drone with 4K camera"),
    ("DR-2024-010", _DJI, "Air 2S", DroneStatus.active,
     "Compact 5.4K video recording drone"),
]

_AWAKE = HibernationStatus.awake
_TRANCE = HibernationStatus.trance
_DEEP = HibernationStatus.deep_hibernation

# serial, maker, height, weight, city, lat, lon, precision, reference,
# status, heart_rate, mutations, superpower
_DUCK_ROWS: list[tuple] = [
    ("DR-2024-001", _DJI, 125, 3200, "Rio de Janeiro", -22.9068, -43.1729, 15,
     "Praia de Copacabana", _AWAKE, None, 8, "Bola de Fogo"),
    ("DR-2024-002", _AUTEL, 95, 2800, "São Paulo", -23.5505, -46.6333, 12,
     "Parque Ibirapuera", _TRANCE, 45, 12, "Raios Elétricos"),
    ("DR-2024-003", _PARROT, 80, 2150, "Brasília", -15.7942, -47.8822, 10,
     "Palácio da Alvorada", _DEEP, 8, 3, None),
    ("DR-2024-004", _DJI, 150, 4500, "Manaus", -3.1190, -60.0217, 25,
     "Encontro das Águas", _AWAKE, None, 15, "Control de Águas"),
    ("DR-2024-005", _AUTEL, 110, 3500, "Salvador", -12.9714, -38.5014, 18,
     "Pelourinho", _TRANCE, 52, 6, "Velocidade Extrema"),
    ("DR-2024-006", _PARROT, 65, 1800, "Curitiba", -25.4284, -49.2733, 8,
     "Jardim Botânico", _AWAKE, None, 20, "Camuflagem"),
    ("DR-2024-007", _DJI, 140, 4100, "Fortaleza", -3.7319, -38.5267, 20,
     "Beira Mar", _DEEP, 5, 5, None),
    ("DR-2024-008", _AUTEL, 100, 2900, "Porto Alegre", -30.0346, -51.2177, 14,
     "Usina do Gasômetro", _AWAKE, None, 18, "Raio Congelante"),
    ("DR-2024-009", _DJI, 105, 3100, "Recife", -8.0476, -34.8770, 16,
     "Marco Zero", _AWAKE, None, 9, "Escudo de Energia"),
    ("DR-2024-010", _PARROT, 88, 2400, "Belém", -1.4558, -48.5042, 11,
     "Ver-o-Peso", _TRANCE, 48, 11, "Manipulação de Vento"),
    ("DR-2024-011", _AUTEL, 120, 3800, "Goiânia", -16.6864, -49.2643, 19,
     "Praça Cívica", _AWAKE, None, 13, "Telecinese"),
    ("DR-2024-012", _DJI, 92, 2700, "Vitória", -20.3155, -40.3128, 13,
     "Ilha do Frade", _AWAKE, None, 7, "Regeneração"),
    ("DR-2024-013", _PARROT, 115, 3600, "Natal", -5.7936, -35.2015, 17,
     "Ponta Negra", _TRANCE, 50, 14, "Manipulação de Terra"),
    ("DR-2024-014", _AUTEL, 85, 2600, "Campinas", -22.9069, -47.0626, 14,
     "Lago do Café", _AWAKE, None, 4, "Sussurro Mental"),
    ("DR-2024-015", _DJI, 98, 2950, "Florianópolis", -27.5954, -48.5480, 15,
     "Praia Mole", _AWAKE, None, 10, "Manipulação de Plasma"),
    ("DR-2024-016", _PARROT, 78, 2200, "João Pessoa", -7.1153, -34.8611, 12,
     "Pontão do Jacaré", _TRANCE, 42, 16, "Reflexos Ultrarrápidos"),
    ("DR-2024-017", _AUTEL, 112, 3400, "Aracaju", -10.9092, -37.0677, 18,
     "Orla de Atalaia", _AWAKE, None, 8, "Criação de Barreiras"),
    ("DR-2024-018", _DJI, 130, 3900, "Maceió", -9.5713, -36.7820, 19,
     "Praia de Pajuçara", _TRANCE, 47, 17, "Aniquilação Molecular"),
    ("DR-2024-019", _PARROT, 93, 2750, "Santos", -23.9608, -46.3248, 16,
     "Aquário Municipal", _AWAKE, None, 6, "Biorregeneração"),
    ("DR-2024-020", _AUTEL, 107, 3050, "Blumenau", -26.9194, -49.0661, 17,
     "Catedral São Paulo", _DEEP, 6, 2, None),
    ("DR-2024-021", _DJI, 102, 2900, "Campos do Jordão", -22.7397, -45.5913, 13,
     "Praça São Benedito", _AWAKE, None, 12, "Control de Calor"),
]


def sample_drones() -> list[dict[str, Any]]:
    return [
        {
            "serial": serial,
            "brand": brand,
            "manufacturer": manufacturer,
            "country": country,
            "model": model,
            "status": status,
            "notes": notes,
        }
        for serial, (brand, manufacturer, country), model, status, notes in _DRONE_ROWS
    ]


def _superpower_fields(name: Optional[str]) -> dict[str, Any]:
    if name is None:
        return {
            "superpower_name": None,
            "superpower_description": None,
            "superpower_type": None,
            "superpower_rarity": None,
            "superpower_risk": None,
        }
    power = get_superpower(name)
    return {
        "superpower_name": power.name,
        "superpower_description": power.description,
        "superpower_type": power.type,
        "superpower_rarity": power.rarity,
        "superpower_risk": power.risk,
    }


def sample_ducks() -> list[dict[str, Any]]:
    ducks = []
    for (
        serial, (brand, manufacturer, country), height, weight, city, lat, lon,
        precision, reference, status, heart_rate, mutations, superpower,
    ) in _DUCK_ROWS:
        ducks.append({
            "drone_serial": serial,
            "drone_brand": brand,
            "drone_manufacturer": manufacturer,
            "drone_country": country,
            "height": height,
            "weight": weight,
            "location_city": city,
            "location_country": "Brasil",
            "gps_lat": lat,
            "gps_lon": lon,
            "precision": precision,
            "reference_point": reference,
            "status": status,
            "heart_rate": heart_rate,
            "mutations": mutations,
            **_superpower_fields(superpower),
        })
    return ducks
