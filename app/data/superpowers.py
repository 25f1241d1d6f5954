from dataclasses import dataclass

from app.models.duck import SuperpowerRarity


@dataclass(frozen=True)
class SuperpowerData:
    name: str
    description: str
    type: str
    rarity: SuperpowerRarity
    risk: int  # 0-100


SUPERPOWER_CATALOG: list[SuperpowerData] = [
    SuperpowerData(
        name="Bola de Fogo",
        description="Capaz de lançar bolas de fogo intensas que atingem até 50 metros de distância",
        type="bélico",
        rarity=SuperpowerRarity.rare,
        risk=75,
    ),
    SuperpowerData(
        name="Raios Elétricos",
        description="Gera descargas elétricas de alta voltagem",
        type="energia",
        rarity=SuperpowerRarity.epic,
        risk=85,
    ),
    SuperpowerData(
        name="Control de Águas",
        description="Manipula corpos d'água e cria ondas gigantes",
        type="elemental",
        rarity=SuperpowerRarity.legendary,
        risk=95,
    ),
    SuperpowerData(
        name="Velocidade Extrema",
        description="Capaz de voar a velocidades supersônicas",
        type="mobilidade",
        rarity=SuperpowerRarity.uncommon,
        risk=40,
    ),
    SuperpowerData(
        name="Camuflagem",
        description="Se mistura perfeitamente com o ambiente",
        type="furtividade",
        rarity=SuperpowerRarity.common,
        risk=25,
    ),
    SuperpowerData(
        name="Raio Congelante",
        description="Congela tudo em um raio de 30 metros",
        type="elemental",
        rarity=SuperpowerRarity.epic,
        risk=80,
    ),
    SuperpowerData(
        name="Escudo de Energia",
        description="Cria barreiras de energia defensivas",
        type="defensivo",
        rarity=SuperpowerRarity.rare,
        risk=55,
    ),
    SuperpowerData(
        name="Manipulação de Vento",
        description="Controla correntes de ar e cria turbilhões",
        type="elemental",
        rarity=SuperpowerRarity.rare,
        risk=60,
    ),
    SuperpowerData(
        name="Telecinese",
        description="Move objetos com o poder da mente",
        type="psíquico",
        rarity=SuperpowerRarity.rare,
        risk=65,
    ),
    SuperpowerData(
        name="Regeneração",
        description="Cura ferimentos rapidamente",
        type="suporte",
        rarity=SuperpowerRarity.uncommon,
        risk=50,
    ),
    SuperpowerData(
        name="Manipulação de Terra",
        description="Controla o solo e cria obstáculos",
        type="elemental",
        rarity=SuperpowerRarity.rare,
        risk=70,
    ),
    SuperpowerData(
        name="Sussurro Mental",
        description="Comunica-se telepaticamente",
        type="psíquico",
        rarity=SuperpowerRarity.common,
        risk=15,
    ),
    SuperpowerData(
        name="Manipulação de Plasma",
        description="Gera e controla plasma energético",
        type="energia",
        rarity=SuperpowerRarity.rare,
        risk=45,
    ),
    SuperpowerData(
        name="Reflexos Ultrarrápidos",
        description="Reage em velocidades sobre-humanas",
        type="mobilidade",
        rarity=SuperpowerRarity.epic,
        risk=72,
    ),
    SuperpowerData(
        name="Criação de Barreiras",
        description="Gera campos de força protetores",
        type="defensivo",
        rarity=SuperpowerRarity.uncommon,
        risk=30,
    ),
    SuperpowerData(
        name="Aniquilação Molecular",
        description="Desintegra matéria ao nível atômico",
        type="bélico",
        rarity=SuperpowerRarity.legendary,
        risk=88,
    ),
    SuperpowerData(
        name="Biorregeneração",
        description="Regenera tecidos danificados rapidamente",
        type="suporte",
        rarity=SuperpowerRarity.uncommon,
        risk=35,
    ),
    SuperpowerData(
        name="Control de Calor",
        description="Absorve e libera energia térmica",
        type="elemental",
        rarity=SuperpowerRarity.rare,
        risk=52,
    ),
]


SUPERPOWERS_BY_NAME: dict[str, SuperpowerData] = {s.name: s for s in SUPERPOWER_CATALOG}


def get_superpower(name: str) -> SuperpowerData:
    """Return the catalog entry for ``name``; raises KeyError if unknown."""
    if name not in SUPERPOWERS_BY_NAME:
        raise KeyError(f"Unknown superpower: {name!r}")
    return SUPERPOWERS_BY_NAME[name]
