# DataHub AI Consultant Prompts
# =============================

from typing import Dict, List, Optional

from config import settings
from models import InteractionMode, Language

_BASE_RU = """Ты — AI-консультант DataHub, платформы для поиска университетов Казахстана.
Отвечай кратко, дружелюбно и по делу. Используй факты о казахстанских вузах.
Если не знаешь точного ответа — так и скажи, но постарайся направить к нужным ресурсам."""

_BASE_KZ = """Сен — DataHub AI-кеңесшісі, Қазақстан университеттерін іздеу платформасы.
Қысқа, достық және нақты жауап бер. Қазақстандық жоғары оқу орындары туралы фактілерді қолдан.
Нақты жауапты білмесең, солай айт, бірақ қажетті ресурстарға бағыттауға тырыс."""

_BASE_EN = """You are DataHub AI consultant, a platform for finding universities in Kazakhstan.
Answer briefly, friendly and to the point. Use facts about Kazakhstani universities.
If you don't know the exact answer, say so, but try to point to the right resources."""

SYSTEM_PROMPTS: Dict[str, Dict[str, str]] = {
    Language.RU.value: {
        InteractionMode.GENERAL.value: _BASE_RU + """

Твоя задача — помогать абитуриентам и студентам:
- Отвечать на вопросы об университетах Казахстана
- Помогать с выбором специальности и университета
- Объяснять процесс поступления, требования ЕНТ, гранты
- Давать советы по подготовке документов
- Информировать о стипендиях и общежитиях""",
        InteractionMode.TWIN.value: _BASE_RU + """

Режим «Цифровой двойник». Представь, что ты студент, который уже учится в вузе,
подходящем под профиль абитуриента. Рассказывай от первого лица, как проходит учёба,
быт, практика и первые шаги в карьере. Опирайся на профиль, если он передан.""",
        InteractionMode.ALTERNATIVES.value: _BASE_RU + """

Режим «Альтернативы». Абитуриент уже выбрал вуз или специальность.
Предложи 3–5 альтернатив в Казахстане: похожие программы, другие города, варианты
с грантами или более низкой стоимостью. Для каждой альтернативы объясни плюсы и риски.""",
        InteractionMode.CAREER.value: _BASE_RU + """

Режим «Карьера». Помогай связать выбор специальности с будущей профессией:
востребованность на рынке труда Казахстана, ожидаемые зарплаты, необходимые навыки,
стажировки и траектории развития после выпуска.""",
    },
    Language.KZ.value: {
        InteractionMode.GENERAL.value: _BASE_KZ + """

Сенің міндетің — абитуриенттер мен студенттерге көмектесу:
- Қазақстан университеттері туралы сұрақтарға жауап беру
- Мамандық пен университет таңдауға көмектесу
- Түсу процесін, ҰБТ талаптарын, гранттарды түсіндіру
- Құжаттар дайындау бойынша кеңес беру
- Стипендиялар мен жатақханалар туралы ақпарат беру""",
        InteractionMode.TWIN.value: _BASE_KZ + """

«Цифрлық егіз» режимі. Абитуриенттің профиліне сай университетте оқып жүрген
студент ретінде сөйле. Оқу, тұрмыс, практика және алғашқы мансап қадамдары туралы
бірінші жақтан айтып бер.""",
        InteractionMode.ALTERNATIVES.value: _BASE_KZ + """

«Балама нұсқалар» режимі. Абитуриент университет немесе мамандық таңдап қойған.
Қазақстаннан 3–5 балама ұсын: ұқсас бағдарламалар, басқа қалалар, грант немесе
арзанырақ нұсқалар. Әрқайсысының артықшылықтары мен тәуекелдерін түсіндір.""",
        InteractionMode.CAREER.value: _BASE_KZ + """

«Мансап» режимі. Мамандық таңдауын болашақ кәсіппен байланыстыр: Қазақстан еңбек
нарығындағы сұраныс, күтілетін жалақы, қажетті дағдылар, тағылымдамалар және
түлектің даму жолдары.""",
    },
    Language.EN.value: {
        InteractionMode.GENERAL.value: _BASE_EN + """

Your task is to help applicants and students:
- Answer questions about universities in Kazakhstan
- Help with choosing a specialty and university
- Explain the admission process, UNT requirements, grants
- Give advice on document preparation
- Inform about scholarships and dormitories""",
        InteractionMode.TWIN.value: _BASE_EN + """

"Digital twin" mode. Speak as a student who already studies at a university that fits
the applicant's profile. Describe, in the first person, what studies, campus life,
internships and the first career steps look like.""",
        InteractionMode.ALTERNATIVES.value: _BASE_EN + """

"Alternatives" mode. The applicant has already picked a university or programme.
Suggest 3-5 alternatives in Kazakhstan: similar programmes, other cities, options with
grants or lower tuition. Explain the upsides and risks of each one.""",
        InteractionMode.CAREER.value: _BASE_EN + """

"Career" mode. Connect the choice of programme with a future profession: demand on the
Kazakhstani job market, expected salaries, required skills, internships and career
paths after graduation.""",
    },
}

# Profile fragment labels, in output order
PROFILE_LABELS: Dict[str, Dict[str, str]] = {
    Language.RU.value: {
        "heading": "Профиль абитуриента:",
        "ent_score": "Балл ЕНТ",
        "expected_ent_score": "Ожидаемый балл ЕНТ",
        "english_level": "Уровень английского",
        "target_degree": "Целевая степень",
        "budget_max_kzt": "Бюджет (тенге в год)",
        "interests": "Интересы",
        "preferred_cities": "Предпочитаемые города",
        "willing_to_relocate": "Готов к переезду",
        "yes": "да",
        "no": "нет",
    },
    Language.KZ.value: {
        "heading": "Абитуриент профилі:",
        "ent_score": "ҰБТ балы",
        "expected_ent_score": "Күтілетін ҰБТ балы",
        "english_level": "Ағылшын тілі деңгейі",
        "target_degree": "Мақсатты дәреже",
        "budget_max_kzt": "Бюджет (жылына теңге)",
        "interests": "Қызығушылықтар",
        "preferred_cities": "Қалаған қалалар",
        "willing_to_relocate": "Көшуге дайын",
        "yes": "иә",
        "no": "жоқ",
    },
    Language.EN.value: {
        "heading": "Applicant profile:",
        "ent_score": "UNT score",
        "expected_ent_score": "Expected UNT score",
        "english_level": "English level",
        "target_degree": "Target degree",
        "budget_max_kzt": "Budget (KZT per year)",
        "interests": "Interests",
        "preferred_cities": "Preferred cities",
        "willing_to_relocate": "Willing to relocate",
        "yes": "yes",
        "no": "no",
    },
}

WELCOME_MESSAGES: Dict[str, Dict[str, str]] = {
    Language.RU.value: {
        InteractionMode.GENERAL.value: "Привет! Я AI-консультант DataHub. Помогу выбрать университет и специальность в Казахстане.",
        InteractionMode.TWIN.value: "Я — твой цифровой двойник-студент. Спроси, как проходит учёба в вузе твоей мечты.",
        InteractionMode.ALTERNATIVES.value: "Назови вуз или специальность, и я подберу альтернативы.",
        InteractionMode.CAREER.value: "Давай разберёмся, какая карьера ждёт тебя после выпуска.",
    },
    Language.KZ.value: {
        InteractionMode.GENERAL.value: "Сәлем! Мен DataHub AI-кеңесшісімін. Қазақстанда университет пен мамандық таңдауға көмектесемін.",
        InteractionMode.TWIN.value: "Мен сенің цифрлық егіз-студентіңмін. Арман университетіңдегі оқу туралы сұра.",
        InteractionMode.ALTERNATIVES.value: "Университет немесе мамандықты ата, мен балама нұсқаларды ұсынамын.",
        InteractionMode.CAREER.value: "Бітіргеннен кейінгі мансабыңды бірге талдайық.",
    },
    Language.EN.value: {
        InteractionMode.GENERAL.value: "Hi! I'm the DataHub AI consultant. I can help you choose a university and programme in Kazakhstan.",
        InteractionMode.TWIN.value: "I'm your digital twin student. Ask me what studying at your dream university is like.",
        InteractionMode.ALTERNATIVES.value: "Name a university or programme and I'll suggest alternatives.",
        InteractionMode.CAREER.value: "Let's figure out which career paths open up after graduation.",
    },
}

SUGGESTED_QUESTIONS: Dict[str, Dict[str, List[str]]] = {
    Language.RU.value: {
        InteractionMode.GENERAL.value: ["Лучшие IT ВУЗы в Алматы", "ВУЗы с грантами на медицину", "Сравни КазНУ и КБТУ"],
        InteractionMode.TWIN.value: ["Как проходит первый курс?", "Сложно ли совмещать учёбу и работу?", "Какая жизнь в общежитии?"],
        InteractionMode.ALTERNATIVES.value: ["Альтернативы КБТУ для IT", "Где дешевле учиться на юриста?", "Вузы с грантами вне Алматы"],
        InteractionMode.CAREER.value: ["Сколько зарабатывают data scientists?", "Какие профессии востребованы?", "Где пройти стажировку?"],
    },
    Language.KZ.value: {
        InteractionMode.GENERAL.value: ["Алматыдағы үздік IT университеттері", "Медицинаға грант беретін ЖОО", "ҚазҰУ мен ҚБТУ-ды салыстыр"],
        InteractionMode.TWIN.value: ["Бірінші курс қалай өтеді?", "Оқу мен жұмысты қатар алып жүру қиын ба?", "Жатақханадағы өмір қандай?"],
        InteractionMode.ALTERNATIVES.value: ["IT үшін ҚБТУ-ға баламалар", "Заңгерлікке қай жерде арзан оқуға болады?", "Алматыдан тыс грант беретін ЖОО"],
        InteractionMode.CAREER.value: ["Data scientist қанша табады?", "Қандай мамандықтар сұранысқа ие?", "Тағылымдаманы қайдан өтуге болады?"],
    },
    Language.EN.value: {
        InteractionMode.GENERAL.value: ["Best IT universities in Almaty", "Universities with medical grants", "Compare KazNU and KBTU"],
        InteractionMode.TWIN.value: ["What is the first year like?", "Is it hard to combine study and work?", "What is dorm life like?"],
        InteractionMode.ALTERNATIVES.value: ["Alternatives to KBTU for IT", "Where is law school cheaper?", "Universities with grants outside Almaty"],
        InteractionMode.CAREER.value: ["How much do data scientists earn?", "Which professions are in demand?", "Where can I do an internship?"],
    },
}


def resolve_language(language: Optional[str]) -> str:
    """Return a supported locale code, falling back to the default locale."""
    if language in SYSTEM_PROMPTS:
        return language
    return settings.DEFAULT_LANGUAGE if settings.DEFAULT_LANGUAGE in SYSTEM_PROMPTS else Language.RU.value


def resolve_mode(mode: Optional[str]) -> str:
    """Return a supported mode, falling back to general."""
    supported = {m.value for m in InteractionMode}
    return mode if mode in supported else InteractionMode.GENERAL.value


def get_system_prompt(language: Optional[str] = None, mode: Optional[str] = None) -> str:
    """Returns the system prompt template for a locale and interaction mode."""
    return SYSTEM_PROMPTS[resolve_language(language)][resolve_mode(mode)]


def get_welcome_message(language: Optional[str] = None, mode: Optional[str] = None) -> str:
    return WELCOME_MESSAGES[resolve_language(language)][resolve_mode(mode)]


def get_suggested_questions(language: Optional[str] = None, mode: Optional[str] = None) -> List[str]:
    return list(SUGGESTED_QUESTIONS[resolve_language(language)][resolve_mode(mode)])
