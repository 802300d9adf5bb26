"""Question bank for the technology category."""

from __future__ import annotations

from quizmaster.models import Question


def _q(text: str, a: str, b: str, c: str, d: str, correct: int) -> Question:
    return Question(text, (a, b, c, d), correct)


_TECHNOLOGY = (
    _q(
        "Qual foi o primeiro computador pessoal a ser lançado?",
        "Apple I",
        "Commodore 64",
        "IBM PC",
        "Altair 8800",
        0,
    ),
    _q(
        "Qual é a linguagem de programação mais usada no desenvolvimento de aplicativos para iOS?",
        "Swift",
        "Java",
        "C++",
        "Python",
        0,
    ),
    _q(
        "Quem é considerado o pai da computação?",
        "Alan Turing",
        "Charles Babbage",
        "Bill Gates",
        "Steve Jobs",
        1,
    ),
    _q(
        "O que é o HTML?",
        "Uma linguagem de programação",
        "Uma linguagem de marcação",
        "Um sistema operacional",
        "Um banco de dados",
        1,
    ),
    _q(
        "Qual dessas empresas é responsável pelo sistema operacional Android?",
        "Microsoft",
        "Google",
        "Apple",
        "IBM",
        1,
    ),
    _q(
        "Qual é o maior site de vídeos do mundo?",
        "Vimeo",
        "YouTube",
        "Dailymotion",
        "Twitch",
        1,
    ),
    _q(
        "Qual empresa desenvolveu o processador Intel Pentium?",
        "AMD",
        "Intel",
        "NVIDIA",
        "Qualcomm",
        1,
    ),
    _q("Em que ano foi lançado o primeiro iPhone?", "2005", "2007", "2008", "2010", 1),
    _q(
        "O que significa a sigla 'CPU' em um computador?",
        "Central Programming Unit",
        "Central Processing Unit",
        "Central Power Unit",
        "Computer Processing Unit",
        1,
    ),
    _q(
        "Qual é o sistema operacional mais utilizado no mundo?",
        "Linux",
        "Windows",
        "MacOS",
        "Android",
        1,
    ),
    _q(
        "Qual é o principal protocolo utilizado para a comunicação entre dispositivos na internet?",
        "HTTP",
        "FTP",
        "IP",
        "TCP/IP",
        3,
    ),
    _q(
        "O que é o JavaScript?",
        "Uma linguagem de banco de dados",
        "Uma linguagem de programação",
        "Uma ferramenta de edição de vídeo",
        "Uma plataforma de desenvolvimento de jogos",
        1,
    ),
    _q(
        "Qual dessas redes sociais foi fundada por Mark Zuckerberg?",
        "Twitter",
        "Instagram",
        "Facebook",
        "LinkedIn",
        2,
    ),
    _q(
        "Qual é o maior provedor de buscas na internet?",
        "Yahoo!",
        "Bing",
        "Google",
        "DuckDuckGo",
        2,
    ),
    _q(
        "Qual foi o nome do primeiro vírus de computador conhecido?",
        "ILOVEYOU",
        "Morris Worm",
        "Stuxnet",
        "Melissa",
        1,
    ),
    _q(
        "Qual é a principal função de um roteador?",
        "Armazenar dados",
        "Gerenciar tráfego de internet",
        "Proteger a rede contra vírus",
        "Fornecer conexão sem fio",
        1,
    ),
    _q(
        "Quem fundou a Microsoft?",
        "Steve Jobs",
        "Bill Gates",
        "Larry Page",
        "Mark Zuckerberg",
        1,
    ),
    _q(
        "O que significa a sigla 'USB'?",
        "Universal Serial Bus",
        "Universal Service Bus",
        "User Serial Bus",
        "User Service Bus",
        0,
    ),
    _q(
        "Em que ano foi lançado o primeiro modelo do Xbox?",
        "1999",
        "2001",
        "2003",
        "2005",
        1,
    ),
    _q(
        "Qual é a principal função do sistema operacional?",
        "Gerenciar a memória",
        "Gerenciar o hardware do computador",
        "Fazer cálculos",
        "Armazenar arquivos",
        1,
    ),
)


def technology() -> tuple[Question, ...]:
    """Return the technology questions."""
    return _TECHNOLOGY