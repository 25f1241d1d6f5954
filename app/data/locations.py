from dataclasses import dataclass


@dataclass(frozen=True)
class ReferenceLocation:
    city: str
    country: str
    lat: float
    lon: float
    reference_point: str  # landmark used as the measurement reference


REFERENCE_LOCATIONS: list[ReferenceLocation] = [
    ReferenceLocation("Rio de Janeiro", "Brasil", -22.9068, -43.1729, "Praia de Copacabana"),
    ReferenceLocation("São Paulo", "Brasil", -23.5505, -46.6333, "Parque Ibirapuera"),
    ReferenceLocation("Brasília", "Brasil", -15.7942, -47.8822, "Palácio da Alvorada"),
    ReferenceLocation("Manaus", "Brasil", -3.1190, -60.0217, "Encontro das Águas"),
    ReferenceLocation("Salvador", "Brasil", -12.9714, -38.5014, "Pelourinho"),
    ReferenceLocation("Curitiba", "Brasil", -25.4284, -49.2733, "Jardim Botânico"),
    ReferenceLocation("Fortaleza", "Brasil", -3.7319, -38.5267, "Beira Mar"),
    ReferenceLocation("Porto Alegre", "Brasil", -30.0346, -51.2177, "Usina do Gasômetro"),
    ReferenceLocation("Recife", "Brasil", -8.0476, -34.8770, "Marco Zero"),
    ReferenceLocation("Belém", "Brasil", -1.4558, -48.5042, "Ver-o-Peso"),
    ReferenceLocation("Goiânia", "Brasil", -16.6864, -49.2643, "Praça Cívica"),
    ReferenceLocation("Vitória", "Brasil", -20.3155, -40.3128, "Ilha do Frade"),
]
