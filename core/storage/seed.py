"""
Initial catalog content.

Loaded once, by the in-memory repository constructor, before the store is
handed to the HTTP layer. Articles name their category by slug; ids are
resolved while loading.
"""

from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any

from core.logging import get_logger


if TYPE_CHECKING:
    from core.storage.memory import InMemoryCatalogRepository


logger = get_logger(__name__)


def _published(year: int, month: int, day: int) -> datetime:
    return datetime(year, month, day, tzinfo=timezone.utc)


SEED_CATEGORIES: list[dict[str, Any]] = [
    {
        "name": "Direito do Consumidor",
        "slug": "direito-consumidor",
        "description": "Seus direitos nas compras, contratos e serviços do dia a dia.",
        "icon_name": "shopping-cart",
    },
    {
        "name": "Direito Imobiliário",
        "slug": "direito-imobiliario",
        "description": "Aluguel, compra e venda de imóveis e condomínio.",
        "icon_name": "home",
    },
    {
        "name": "Direito do Trabalho",
        "slug": "direito-trabalho",
        "description": "Relações de emprego, rescisão, férias e verbas trabalhistas.",
        "icon_name": "briefcase",
    },
    {
        "name": "Direito de Família",
        "slug": "direito-familia",
        "description": "Divórcio, pensão alimentícia, guarda e inventário.",
        "icon_name": "users",
    },
    {
        "name": "Direito Previdenciário",
        "slug": "direito-previdenciario",
        "description": "Aposentadoria, benefícios do INSS e revisões.",
        "icon_name": "shield",
    },
    {
        "name": "Direito Penal",
        "slug": "direito-penal",
        "description": "Crimes, processo penal e garantias do acusado.",
        "icon_name": "gavel",
    },
]


SEED_ARTICLES: list[dict[str, Any]] = [
    {
        "title": "Aluguel: 5 cláusulas abusivas que você não deve aceitar",
        "slug": "aluguel-clausulas-abusivas",
        "excerpt": "Antes de assinar o contrato de locação, confira as cláusulas que a Lei do Inquilinato proíbe.",
        "content": (
            "O contrato de locação residencial é regido pela Lei 8.245/91. "
            "Cláusulas que exigem mais de uma modalidade de garantia, que obrigam o "
            "inquilino a pagar IPTU sem previsão expressa, ou que impõem multa integral "
            "independentemente do tempo cumprido são consideradas abusivas. "
            "Também é nula a cláusula que proíbe a renovação em locações comerciais "
            "e a que transfere ao inquilino despesas extraordinárias de condomínio."
        ),
        "image_url": "https://images.unsplash.com/photo-1560518883-ce09059eeffa",
        "publish_date": _published(2025, 5, 12),
        "category": "direito-imobiliario",
        "featured": 1,
    },
    {
        "title": "Produto com defeito: troca, conserto ou dinheiro de volta?",
        "slug": "produto-com-defeito",
        "excerpt": "O Código de Defesa do Consumidor dá ao fornecedor 30 dias para resolver o problema. E depois?",
        "content": (
            "Quando um produto apresenta vício, o fornecedor tem 30 dias para saná-lo. "
            "Se não o fizer, o consumidor pode escolher entre a substituição do produto, "
            "a restituição imediata da quantia paga ou o abatimento proporcional do preço. "
            "Produtos essenciais podem ser trocados de imediato."
        ),
        "image_url": "https://images.unsplash.com/photo-1556742049-0cfed4f6a45d",
        "publish_date": _published(2025, 5, 10),
        "category": "direito-consumidor",
        "featured": 1,
    },
    {
        "title": "Demissão sem justa causa: quais verbas você deve receber",
        "slug": "demissao-sem-justa-causa",
        "excerpt": "Saldo de salário, aviso prévio, férias, 13º e multa do FGTS: entenda o cálculo da rescisão.",
        "content": (
            "Na dispensa sem justa causa o empregado tem direito ao saldo de salário, "
            "aviso prévio trabalhado ou indenizado, férias vencidas e proporcionais com "
            "um terço, décimo terceiro proporcional, saque do FGTS com multa de 40% "
            "e acesso ao seguro-desemprego quando preenchidos os requisitos."
        ),
        "image_url": "https://images.unsplash.com/photo-1521791136064-7986c2920216",
        "publish_date": _published(2025, 5, 1),
        "category": "direito-trabalho",
        "featured": 1,
    },
    {
        "title": "Pensão alimentícia: como é definido o valor",
        "slug": "pensao-alimenticia-valor",
        "excerpt": "O binômio necessidade e possibilidade orienta o juiz na fixação dos alimentos.",
        "content": (
            "Não existe percentual fixo em lei para a pensão alimentícia. O juiz considera "
            "a necessidade de quem recebe e a possibilidade de quem paga. Mudanças na "
            "situação financeira de qualquer das partes autorizam pedido de revisão."
        ),
        "image_url": "https://images.unsplash.com/photo-1511895426328-dc8714191300",
        "publish_date": _published(2025, 4, 28),
        "category": "direito-familia",
        "featured": 0,
    },
    {
        "title": "Aposentadoria por idade após a Reforma da Previdência",
        "slug": "aposentadoria-por-idade",
        "excerpt": "Idade mínima, tempo de contribuição e regras de transição explicados.",
        "content": (
            "Após a Emenda Constitucional 103/2019, a aposentadoria por idade exige 65 anos "
            "para homens e 62 para mulheres, além de tempo mínimo de contribuição. "
            "Quem já contribuía antes da reforma pode se enquadrar em regras de transição."
        ),
        "image_url": "https://images.unsplash.com/photo-1447005497901-b3e9ee359928",
        "publish_date": _published(2025, 4, 20),
        "category": "direito-previdenciario",
        "featured": 0,
    },
    {
        "title": "Prisão em flagrante: quais são os seus direitos",
        "slug": "prisao-em-flagrante-direitos",
        "excerpt": "Direito ao silêncio, à comunicação com a família e à audiência de custódia.",
        "content": (
            "A pessoa presa em flagrante tem direito de permanecer calada, de ser assistida "
            "por advogado, de ter sua prisão comunicada à família e de ser apresentada a um "
            "juiz em até 24 horas na audiência de custódia."
        ),
        "image_url": "https://images.unsplash.com/photo-1589829545856-d10d557cf95f",
        "publish_date": _published(2025, 4, 15),
        "category": "direito-penal",
        "featured": 0,
    },
    {
        "title": "Cobrança indevida: como pedir a devolução em dobro",
        "slug": "cobranca-indevida-devolucao-em-dobro",
        "excerpt": "Pagou o que não devia? O consumidor pode ter direito a receber o dobro do valor.",
        "content": (
            "O parágrafo único do artigo 42 do CDC garante ao consumidor cobrado em quantia "
            "indevida a repetição do indébito por valor igual ao dobro do que pagou em excesso, "
            "acrescido de correção monetária e juros, salvo engano justificável."
        ),
        "image_url": "https://images.unsplash.com/photo-1554224155-6726b3ff858f",
        "publish_date": _published(2025, 4, 8),
        "category": "direito-consumidor",
        "featured": 0,
    },
]


SEED_SOLUTIONS: list[dict[str, Any]] = [
    {
        "title": "Consultoria Jurídica Online",
        "description": "Tire suas dúvidas com advogados especializados sem sair de casa.",
        "image_url": "https://images.unsplash.com/photo-1573497019940-1c28c88b4f3e",
        "link": "/contato",
        "link_text": "Agendar consulta",
    },
    {
        "title": "Modelos de Documentos",
        "description": "Petições, notificações e contratos revisados para você adaptar ao seu caso.",
        "image_url": "https://images.unsplash.com/photo-1450101499163-c8848c66ca85",
        "link": "/modelos",
        "link_text": "Ver modelos",
    },
    {
        "title": "Calculadora de Rescisão",
        "description": "Simule as verbas rescisórias a que você tem direito.",
        "image_url": "https://images.unsplash.com/photo-1554224154-26032ffc0d07",
        "link": "/calculadora-rescisao",
        "link_text": "Calcular agora",
    },
]


def seed_catalog(repository: "InMemoryCatalogRepository") -> None:
    """Load the fixed initial categories, articles and solutions."""
    category_ids: dict[str, int] = {}
    for entry in SEED_CATEGORIES:
        category = repository.add_category(**entry)
        category_ids[category.slug] = category.id

    for entry in SEED_ARTICLES:
        fields = dict(entry)
        category_slug = fields.pop("category")
        repository.add_article(category_id=category_ids[category_slug], **fields)

    for entry in SEED_SOLUTIONS:
        repository.add_solution(**entry)

    logger.info(
        "Seed catalog loaded",
        categories=len(SEED_CATEGORIES),
        articles=len(SEED_ARTICLES),
        solutions=len(SEED_SOLUTIONS),
    )
