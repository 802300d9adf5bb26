"""Question banks for the history and geography categories."""

from __future__ import annotations

from quizmaster.models import Question


def _q(text: str, a: str, b: str, c: str, d: str, correct: int) -> Question:
    return Question(text, (a, b, c, d), correct)


_HISTORY = (
    _q(
        "Em que ano ocorreu a Proclamação da República no Brasil?",
        "1888",
        "1889",
        "1890",
        "1822",
        1,
    ),
    _q(
        "Quem foi o líder da Alemanha nazista durante a Segunda Guerra Mundial?",
        "Joseph Stalin",
        "Benito Mussolini",
        "Adolf Hitler",
        "Winston Churchill",
        2,
    ),
    _q(
        "Qual civilização construiu as pirâmides de Gizé?",
        "Astecas",
        "Maias",
        "Egípcios",
        "Incas",
        2,
    ),
    _q(
        "Em que ano o Brasil foi 'descoberto' pelos portugueses?",
        "1500",
        "1492",
        "1521",
        "1530",
        0,
    ),
    _q(
        "Quem foi Tiradentes?",
        "Imperador do Brasil",
        "Líder da Inconfidência Mineira",
        "Bandeirante",
        "Rei de Portugal",
        1,
    ),
    _q(
        "O que marcou o fim da Idade Média?",
        "Descobrimento da América",
        "Revolução Francesa",
        "Queda de Constantinopla",
        "Peste Negra",
        2,
    ),
    _q(
        "Quem foi o primeiro presidente do Brasil?",
        "Marechal Deodoro da Fonseca",
        "Getúlio Vargas",
        "Dom Pedro II",
        "Campos Sales",
        0,
    ),
    _q(
        "Quem comandou a Revolução Russa de 1917?",
        "Lenin",
        "Stalin",
        "Trotsky",
        "Gorbachev",
        0,
    ),
    _q(
        "Em que país nasceu Napoleão Bonaparte?",
        "França",
        "Itália",
        "Alemanha",
        "Áustria",
        0,
    ),
    _q(
        "O que foi o Muro de Berlim?",
        "Uma muralha chinesa na Alemanha",
        "Divisão entre EUA e URSS",
        "Barreira entre Alemanha Oriental e Ocidental",
        "Fortificação medieval",
        2,
    ),
    _q(
        "Qual era o nome do navio que trouxe D. João VI ao Brasil?",
        "Caravela Real",
        "Nau Príncipe Real",
        "Navio Almirante",
        "Santa Maria",
        1,
    ),
    _q(
        "Qual império foi governado por César?",
        "Império Grego",
        "Império Romano",
        "Império Egípcio",
        "Império Persa",
        1,
    ),
    _q(
        "Em que ano terminou a Segunda Guerra Mundial?",
        "1944",
        "1945",
        "1946",
        "1950",
        1,
    ),
    _q(
        "Qual era a capital do Império Bizantino?",
        "Roma",
        "Atenas",
        "Constantinopla",
        "Istambul",
        2,
    ),
    _q(
        "Quem assinou a Lei Áurea?",
        "Dom Pedro I",
        "Princesa Isabel",
        "Marechal Deodoro",
        "Getúlio Vargas",
        1,
    ),
    _q(
        "Qual país foi o principal inimigo da Inglaterra na Primeira Guerra?",
        "França",
        "Alemanha",
        "Itália",
        "Rússia",
        1,
    ),
    _q(
        "Qual era o nome da política de colonização portuguesa no Brasil?",
        "Feudos",
        "Capitanias Hereditárias",
        "Sesmarias",
        "Colônias Livres",
        1,
    ),
    _q(
        "O que foi a Revolução Industrial?",
        "Movimento político",
        "Transição para produção mecanizada",
        "Revolta de trabalhadores",
        "Processo de independência dos EUA",
        1,
    ),
    _q(
        "Onde ocorreu a Revolução Francesa?",
        "Alemanha",
        "Itália",
        "França",
        "Rússia",
        2,
    ),
    _q(
        "Quem descobriu o caminho marítimo para as Índias?",
        "Cristóvão Colombo",
        "Pedro Álvares Cabral",
        "Fernão de Magalhães",
        "Vasco da Gama",
        3,
    ),
)

_GEOGRAPHY = (
    _q(
        "Qual é o maior país do mundo em extensão territorial?",
        "China",
        "Estados Unidos",
        "Rússia",
        "Canadá",
        2,
    ),
    _q(
        "Qual é o rio mais extenso do mundo?",
        "Rio Nilo",
        "Rio Amazonas",
        "Rio Mississipi",
        "Rio Yangtzé",
        1,
    ),
    _q(
        "Qual é o maior deserto do mundo?",
        "Deserto do Saara",
        "Deserto de Gobi",
        "Deserto da Antártida",
        "Deserto do Atacama",
        2,
    ),
    _q(
        "Qual é o país com a maior população do mundo?",
        "Índia",
        "Estados Unidos",
        "China",
        "Indonésia",
        0,
    ),
    _q(
        "Qual é o oceano que banha a costa leste do Brasil?",
        "Oceano Pacífico",
        "Oceano Índico",
        "Oceano Glacial Antártico",
        "Oceano Atlântico",
        3,
    ),
    _q("Qual é a capital do Canadá?", "Toronto", "Vancouver", "Montreal", "Ottawa", 3),
    _q(
        "Qual é a montanha mais alta do mundo?",
        "Monte Fuji",
        "Monte Everest",
        "Monte Kilimanjaro",
        "Monte Aconcágua",
        1,
    ),
    _q(
        "Qual é o bioma predominante na região Norte do Brasil?",
        "Cerrado",
        "Mata Atlântica",
        "Caatinga",
        "Floresta Amazônica",
        3,
    ),
    _q(
        "Qual continente é banhado pelo Oceano Glacial Ártico?",
        "Ásia",
        "Europa",
        "América do Norte",
        "Todos os anteriores",
        3,
    ),
    _q(
        "O Monte Everest está localizado em qual cordilheira?",
        "Andes",
        "Rocosas",
        "Himalaia",
        "Alpes",
        2,
    ),
    _q(
        "Qual destes países não é cortado pela linha do Equador?",
        "Brasil",
        "Indonésia",
        "Equador",
        "Argentina",
        3,
    ),
    _q("Qual é a capital da Austrália?", "Sydney", "Melbourne", "Canberra", "Perth", 2),
    _q(
        "Qual é o menor país do mundo em território?",
        "Mônaco",
        "Malta",
        "Vaticano",
        "San Marino",
        2,
    ),
    _q(
        "Em qual continente fica o deserto do Saara?",
        "Ásia",
        "América",
        "África",
        "Oceania",
        2,
    ),
    _q(
        "Qual é a capital da África do Sul?",
        "Cidade do Cabo",
        "Pretória",
        "Joanesburgo",
        "Durban",
        1,
    ),
    _q(
        "Quais são os continentes totalmente no Hemisfério Sul?",
        "Antártica e Austrália",
        "África e América do Sul",
        "Ásia e Oceania",
        "Europa e África",
        0,
    ),
    _q("Qual é a capital do Japão?", "Kyoto", "Osaka", "Tóquio", "Hiroshima", 2),
    _q(
        "Qual oceano fica entre a África e a Austrália?",
        "Atlântico",
        "Pacífico",
        "Índico",
        "Ártico",
        2,
    ),
    _q(
        "Qual estado brasileiro tem o maior número de municípios?",
        "São Paulo",
        "Minas Gerais",
        "Bahia",
        "Rio Grande do Sul",
        1,
    ),
    _q("Quantos estados tem o Brasil?", "24", "25", "26", "27", 2),
)


def history() -> tuple[Question, ...]:
    """Return the history questions."""
    return _HISTORY


def geography() -> tuple[Question, ...]:
    """Return the geography questions."""
    return _GEOGRAPHY