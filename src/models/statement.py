"""
FinancialStatement and CostCategory — the audit engine's input contract.

Built from figures extracted out of an uploaded PDF. Values are stored as
received: the engine re-validates their numeric shape instead of trusting
the extraction layer.
"""
from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(frozen=True)
class CostCategory:
    """A single cost-center line of the statement breakdown."""

    nome: str
    valor: Optional[Any] = None         # currency
    percentual: Optional[Any] = None    # share of the total, in percent

    @classmethod
    def from_dict(cls, data: dict) -> "CostCategory":
        return cls(
            nome=data.get("nome", data.get("categoria", "")) or "",
            valor=data.get("valor"),
            percentual=data.get("percentual"),
        )

    def to_dict(self) -> dict:
        return {"nome": self.nome, "valor": self.valor, "percentual": self.percentual}


@dataclass(frozen=True)
class FinancialStatement:
    """Monthly condominium statement ("prestação de contas")."""

    receitas: Optional[Any] = None           # revenue, expected non-negative
    despesas: Optional[Any] = None           # expenses
    saldo_anterior: Optional[Any] = None     # opening balance, may be negative
    saldo_final: Optional[Any] = None        # closing balance, may be negative
    categorias: tuple = field(default=())    # Tuple[CostCategory, ...]
    cnpj: Optional[str] = None
    data_inicio: Optional[Any] = None        # ISO string, date or datetime
    data_fim: Optional[Any] = None

    # Contract (camelCase) name -> attribute
    FIELD_NAMES = {
        "receitas": "receitas",
        "despesas": "despesas",
        "saldoAnterior": "saldo_anterior",
        "saldoFinal": "saldo_final",
        "categorias": "categorias",
        "cnpj": "cnpj",
        "dataInicio": "data_inicio",
        "dataFim": "data_fim",
    }

    def get(self, contract_name: str) -> Any:
        """Read a field by its contract name (e.g. ``saldoFinal``)."""
        return getattr(self, self.FIELD_NAMES[contract_name])

    @classmethod
    def from_dict(cls, data: dict) -> "FinancialStatement":
        """Build from a camelCase statement dict; unknown keys are ignored."""
        categorias = tuple(
            c if isinstance(c, CostCategory) else CostCategory.from_dict(c)
            for c in (data.get("categorias") or [])
        )
        return cls(
            receitas=data.get("receitas"),
            despesas=data.get("despesas"),
            saldo_anterior=data.get("saldoAnterior"),
            saldo_final=data.get("saldoFinal"),
            categorias=categorias,
            cnpj=data.get("cnpj"),
            data_inicio=data.get("dataInicio"),
            data_fim=data.get("dataFim"),
        )

    def to_dict(self) -> dict:
        return {
            "receitas": self.receitas,
            "despesas": self.despesas,
            "saldoAnterior": self.saldo_anterior,
            "saldoFinal": self.saldo_final,
            "categorias": [c.to_dict() for c in self.categorias],
            "cnpj": self.cnpj,
            "dataInicio": self.data_inicio,
            "dataFim": self.data_fim,
        }
