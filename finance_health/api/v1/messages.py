"""Display text for health summaries and tips, keyed by locale"""

from typing import Dict, Optional, Tuple

from finance_health.config import settings
from finance_health.domain.exceptions import UnsupportedLocaleError
from finance_health.domain.models import HealthTier, TipKind

EN_SUMMARIES: Dict[HealthTier, str] = {
    HealthTier.EXCELLENT: "Your financial health is excellent! Keep up the great work.",
    HealthTier.ON_TRACK: "You're on the right track. Stay focused on your goals.",
    HealthTier.NEEDS_IMPROVEMENT: "Your finances have room for improvement. Focus and discipline will pay off.",
    HealthTier.NEEDS_ATTENTION: "Your finances need attention. Let's put together an action plan.",
    HealthTier.INCOMPLETE_DATA: "Add your income and expenses for a complete analysis.",
    HealthTier.NO_DATA: "Add transactions to receive your analysis.",
}

EN_TIPS: Dict[TipKind, Tuple[str, str]] = {
    TipKind.BUILD_BUDGET: (
        "Build a Detailed Budget",
        "Use budget envelopes to plan and control your spending by category.",
    ),
    TipKind.ACCELERATE_DEBT_PAYOFF: (
        "Accelerate Debt Payoff",
        "Consider the Avalanche or Snowball strategy to pay off debts faster.",
    ),
    TipKind.BUILD_EMERGENCY_FUND: (
        "Build Your Emergency Fund",
        "Set aside 3-6 months of essential expenses somewhere safe and easy to access.",
    ),
    TipKind.AUTOMATE_INVESTMENTS: (
        "Automate Your Investments",
        "Set up automatic monthly transfers to your investment account.",
    ),
    TipKind.REVIEW_GOALS: (
        "Review Your Goals",
        "Make sure your financial goals are still aligned with your life plans.",
    ),
    TipKind.INCREASE_INCOME: (
        "Increase Your Income",
        "Explore new income sources such as freelance work or investments.",
    ),
    TipKind.RECORD_TRANSACTIONS: (
        "Record Your Transactions",
        "Start by adding this month's income and expenses for an accurate analysis.",
    ),
    TipKind.CREATE_ENVELOPES: (
        "Create Budget Envelopes",
        "Set spending limits for categories like groceries and leisure.",
    ),
    TipKind.SET_GOAL: (
        "Set a Financial Goal",
        "A clear objective, like a trip, can motivate you to save.",
    ),
    TipKind.RECORD_INCOME: (
        "Record an Income",
        "Start by adding your income sources for a complete analysis.",
    ),
    TipKind.RECORD_EXPENSES: (
        "Record Your Expenses",
        "Log your spending to understand where your money is going.",
    ),
    TipKind.DEFINE_GOAL: (
        "Define a Goal",
        "Creating a goal gives you a great starting point for planning.",
    ),
}

PT_BR_SUMMARIES: Dict[HealthTier, str] = {
    HealthTier.EXCELLENT: "Sua saúde financeira está excelente! Continue com o ótimo trabalho.",
    HealthTier.ON_TRACK: "Você está no caminho certo. Continue focado nos seus objetivos.",
    HealthTier.NEEDS_IMPROVEMENT: "Sua situação financeira tem espaço para melhorias. Foco e disciplina trarão resultados.",
    HealthTier.NEEDS_ATTENTION: "Sua situação financeira requer atenção. Vamos traçar um plano de ação.",
    HealthTier.INCOMPLETE_DATA: "Adicione suas receitas e despesas para uma análise completa.",
    HealthTier.NO_DATA: "Adicione transações para receber sua análise.",
}

PT_BR_TIPS: Dict[TipKind, Tuple[str, str]] = {
    TipKind.BUILD_BUDGET: (
        "Crie um Orçamento Detalhado",
        "Use os envelopes de orçamento para planejar e controlar seus gastos por categoria.",
    ),
    TipKind.ACCELERATE_DEBT_PAYOFF: (
        "Acelere o Pagamento de Dívidas",
        "Considere usar a estratégia Avalanche ou Bola de Neve para quitar dívidas mais rápido.",
    ),
    TipKind.BUILD_EMERGENCY_FUND: (
        "Construa sua Reserva de Emergência",
        "Guarde o equivalente a 3-6 meses de suas despesas essenciais em um local seguro e de fácil acesso.",
    ),
    TipKind.AUTOMATE_INVESTMENTS: (
        "Automatize seus Investimentos",
        "Configure transferências automáticas para sua conta de investimentos todo mês.",
    ),
    TipKind.REVIEW_GOALS: (
        "Revise Suas Metas",
        "Garanta que suas metas financeiras continuam alinhadas com seus objetivos de vida.",
    ),
    TipKind.INCREASE_INCOME: (
        "Aumente sua Renda",
        "Explore novas fontes de renda, como trabalhos freelancer ou investimentos.",
    ),
    TipKind.RECORD_TRANSACTIONS: (
        "Registre Suas Transações",
        "Comece adicionando suas receitas e despesas do mês para uma análise precisa.",
    ),
    TipKind.CREATE_ENVELOPES: (
        "Crie Envelopes de Orçamento",
        "Defina limites de gastos para categorias como alimentação e lazer.",
    ),
    TipKind.SET_GOAL: (
        "Defina uma Meta Financeira",
        "Ter um objetivo claro, como uma viagem, pode motivar a economizar.",
    ),
    TipKind.RECORD_INCOME: (
        "Registre uma Receita",
        "Comece adicionando suas fontes de renda para uma análise completa.",
    ),
    TipKind.RECORD_EXPENSES: (
        "Cadastre suas Despesas",
        "Registre seus gastos para entender para onde seu dinheiro está indo.",
    ),
    TipKind.DEFINE_GOAL: (
        "Defina uma Meta",
        "Criar uma meta pode te dar um ótimo ponto de partida para o planejamento.",
    ),
}

CATALOGS: Dict[str, Tuple[Dict[HealthTier, str], Dict[TipKind, Tuple[str, str]]]] = {
    "en": (EN_SUMMARIES, EN_TIPS),
    "pt-BR": (PT_BR_SUMMARIES, PT_BR_TIPS),
}


def resolve_locale(locale: Optional[str] = None) -> str:
    """
    Normalize a requested locale to a catalog key.

    Matching is case-insensitive and accepts "_" for "-" (pt_br -> pt-BR).
    Falls back to the configured default when none is given.

    Raises:
        UnsupportedLocaleError: No catalog for the locale
    """
    if not locale:
        locale = settings.default_locale

    wanted = locale.replace("_", "-").lower()
    for key in CATALOGS:
        if key.lower() == wanted:
            return key
    raise UnsupportedLocaleError(locale)


def render_summary(tier: HealthTier, locale: Optional[str] = None) -> str:
    summaries, _ = CATALOGS[resolve_locale(locale)]
    return summaries[tier]


def render_tip(kind: TipKind, locale: Optional[str] = None) -> Tuple[str, str]:
    """Returns: (title, description)"""
    _, tips = CATALOGS[resolve_locale(locale)]
    return tips[kind]
