"""Question banks for the general knowledge and science categories."""

from __future__ import annotations

from quizmaster.models import Question


def _q(text: str, a: str, b: str, c: str, d: str, correct: int) -> Question:
    return Question(text, (a, b, c, d), correct)


_GENERAL_KNOWLEDGE = (
    _q("Qual é o maior oceano do planeta?", "Atlântico", "Índico", "Ártico", "Pacífico", 3),
    _q("Qual é a capital da Austrália?", "Sydney", "Melbourne", "Canberra", "Brisbane", 2),
    _q("Quem pintou a Mona Lisa?", "Van Gogh", "Leonardo da Vinci", "Michelangelo", "Rafael", 1),
    _q("Qual é o elemento químico do ouro?", "Go", "Ag", "Au", "Pt", 2),
    _q("Qual é o país mais populoso do mundo?", "Índia", "Estados Unidos", "Indonésia", "China", 0),
    _q("Quantos continentes existem?", "5", "6", "7", "8", 2),
    _q("Qual é o idioma mais falado no mundo?", "Inglês", "Chinês mandarim", "Espanhol", "Hindi", 1),
    _q(
        "Quem escreveu 'Dom Quixote'?",
        "Machado de Assis",
        "José Saramago",
        "Miguel de Cervantes",
        "Gabriel García Márquez",
        2,
    ),
    _q(
        "Qual é o maior país em extensão territorial?",
        "Canadá",
        "China",
        "Estados Unidos",
        "Rússia",
        3,
    ),
    _q("Que país é conhecido como o berço da democracia?", "Itália", "Egito", "Grécia", "França", 2),
    _q("Em que continente está o Egito?", "Ásia", "África", "Europa", "América", 1),
    _q(
        "Quem foi o primeiro homem a pisar na Lua?",
        "Buzz Aldrin",
        "Neil Armstrong",
        "Yuri Gagarin",
        "Alan Shepard",
        1,
    ),
    _q(
        "Qual o maior animal terrestre?",
        "Elefante-africano",
        "Hipopótamo",
        "Girafa",
        "Urso-pardo",
        0,
    ),
    _q("Qual é a fórmula da água?", "H2", "O2", "CO2", "H2O", 3),
    _q("Em que país se localiza a Torre Eiffel?", "Itália", "Inglaterra", "França", "Alemanha", 2),
    _q("Quantos segundos tem uma hora?", "360", "3600", "6000", "60", 1),
    _q(
        "Qual o nome do rio mais extenso do mundo?",
        "Amazonas",
        "Nilo",
        "Yangtzé",
        "Mississipi",
        0,
    ),
    _q("Qual é o maior planeta do sistema solar?", "Terra", "Júpiter", "Saturno", "Netuno", 1),
    _q(
        "Em que continente está o Brasil?",
        "África",
        "América do Norte",
        "América do Sul",
        "Europa",
        2,
    ),
    _q("Qual animal é símbolo da paz?", "Cavalo", "Pomba", "Leão", "Águia", 1),
)

_SCIENCE = (
    _q("Qual é o planeta mais próximo do Sol?", "Mercúrio", "Vênus", "Terra", "Marte", 0),
    _q(
        "O que é H2SO4?",
        "Ácido clorídrico",
        "Ácido sulfúrico",
        "Ácido nítrico",
        "Ácido acético",
        1,
    ),
    _q(
        "Qual órgão humano é responsável pela filtração do sangue?",
        "Fígado",
        "Pulmão",
        "Rim",
        "Estômago",
        2,
    ),
    _q(
        "Qual é o gás mais abundante na atmosfera da Terra?",
        "Oxigênio",
        "Nitrogênio",
        "Gás Carbônico",
        "Hidrogênio",
        1,
    ),
    _q("Qual desses é um mamífero?", "Tubarão", "Polvo", "Golfinho", "Pinguim", 2),
    _q("Qual é a unidade de medida da força?", "Joule", "Watt", "Newton", "Ampère", 2),
    _q("Qual é o símbolo químico do sódio?", "Na", "So", "Sd", "Sn", 0),
    _q(
        "Quem propôs a teoria da relatividade?",
        "Isaac Newton",
        "Galileu Galilei",
        "Albert Einstein",
        "Stephen Hawking",
        2,
    ),
    _q("Qual planeta tem os anéis mais visíveis?", "Netuno", "Urano", "Júpiter", "Saturno", 3),
    _q(
        "Qual é a função dos glóbulos vermelhos?",
        "Combater infecções",
        "Transportar oxigênio",
        "Coagular o sangue",
        "Produzir hormônios",
        1,
    ),
    _q("O que é DNA?", "Hormônio", "Proteína", "Ácido nucleico", "Enzima", 2),
    _q("Qual desses animais é um réptil?", "Sapo", "Jacaré", "Golfinho", "Andorinha", 1),
    _q("Quantos cromossomos tem um ser humano?", "44", "46", "48", "50", 1),
    _q(
        "Qual é o nome do estado da matéria entre sólido e gasoso?",
        "Plasma",
        "Líquido",
        "Vapor",
        "Condensado",
        1,
    ),
    _q(
        "A fotossíntese ocorre em qual organela?",
        "Mitocôndria",
        "Núcleo",
        "Cloroplasto",
        "Lisossomo",
        2,
    ),
    _q(
        "Qual é a velocidade da luz no vácuo?",
        "150.000 km/s",
        "200.000 km/s",
        "300.000 km/s",
        "500.000 km/s",
        2,
    ),
    _q("Qual é o principal gás causador do efeito estufa?", "O2", "H2", "CO2", "N2", 2),
    _q(
        "Qual desses não é um estado físico da matéria?",
        "Sólido",
        "Líquido",
        "Gás",
        "Ácido",
        3,
    ),
    _q("Qual é o menor osso do corpo humano?", "Fêmur", "Estribo", "Tíbia", "Ulna", 1),
    _q(
        "Qual planeta é conhecido como planeta vermelho?",
        "Marte",
        "Vênus",
        "Júpiter",
        "Terra",
        0,
    ),
)


def general_knowledge() -> tuple[Question, ...]:
    """Return the general knowledge questions."""
    return _GENERAL_KNOWLEDGE


def science() -> tuple[Question, ...]:
    """Return the science questions."""
    return _SCIENCE