"""
Script de execução da auditoria financeira de uma prestação de contas.

Lê:
  - audit_io/extracted_data.json   (saída da camada de extração de PDF)

Produz:
  - audit_io/audit_result.json

Uso:
  python run_audit.py [entrada.json] [saida.json] [prestacao_id]
"""
import json
import logging
import sys
from pathlib import Path

from jsonschema import validate

from src.config.settings import LOG_LEVEL

# ---------------------------------------------------------------------------
# Setup logging
# ---------------------------------------------------------------------------
logging.basicConfig(
    level=getattr(logging, LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s — %(message)s",
    stream=sys.stdout,
)
logger = logging.getLogger("run_audit")

# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------
ROOT = Path(__file__).parent
IO_DIR = ROOT / "audit_io"

INPUT_FILE = Path(sys.argv[1]) if len(sys.argv) > 1 else IO_DIR / "extracted_data.json"
OUTPUT_FILE = Path(sys.argv[2]) if len(sys.argv) > 2 else IO_DIR / "audit_result.json"
PRESTACAO_ID = sys.argv[3] if len(sys.argv) > 3 else INPUT_FILE.stem

# ---------------------------------------------------------------------------
# Carrega entrada
# ---------------------------------------------------------------------------
from src.audit.analysis import run_analysis
from src.audit.cnpj import format_cnpj
from src.audit.intake import parse_extraction_payload
from src.audit.report import generate_recommendations, generate_summary
from src.config.constants import ENGINE_VERSION
from src.config.schemas import VALIDATION_RESULT_SCHEMA
from src.models.thresholds import ValidationThresholds

logger.info("Carregando dados extraídos de %s", INPUT_FILE)

with open(INPUT_FILE, encoding="utf-8") as f:
    payload = parse_extraction_payload(f.read())

if payload.metadata is not None:
    logger.info("método de extração : %s", payload.metadata.extraction_method)
    logger.info("confiança          : %.2f", payload.metadata.confidence_score)
logger.info("categorias         : %d", len(payload.statement.categorias))
logger.info("inconsistências LLM: %d", len(payload.inconsistencias))

# ---------------------------------------------------------------------------
# Execução da auditoria
# ---------------------------------------------------------------------------
thresholds = ValidationThresholds.from_settings()
analysis = run_analysis(PRESTACAO_ID, payload.statement, thresholds)
output = analysis.to_dict()
output["engineVersion"] = ENGINE_VERSION
output["thresholds"] = thresholds.to_dict()

# O contrato com a camada de apresentação é verificado antes de gravar
validate(instance=output["validationResult"], schema=VALIDATION_RESULT_SCHEMA)

output["report"] = {
    "summary": generate_summary(analysis.validation_result),
    "recommendations": generate_recommendations(analysis.validation_result),
}
output["extraction"] = {
    "metadata": payload.metadata.model_dump() if payload.metadata else None,
    "inconsistencias": [i.model_dump() for i in payload.inconsistencias],
}

# ---------------------------------------------------------------------------
# Salvamento
# ---------------------------------------------------------------------------
OUTPUT_FILE.parent.mkdir(parents=True, exist_ok=True)
with open(OUTPUT_FILE, "w", encoding="utf-8") as f:
    json.dump(output, f, ensure_ascii=False, indent=2)

logger.info("Resultado salvo em: %s", OUTPUT_FILE)

# ---------------------------------------------------------------------------
# Resumo
# ---------------------------------------------------------------------------
print("\n" + "=" * 70)
print("AUDITORIA FINANCEIRA — RESUMO")
print("=" * 70)
print(f"prestacao_id : {analysis.prestacao_id}")
if payload.statement.cnpj:
    print(f"cnpj         : {format_cnpj(payload.statement.cnpj)}")
print(f"válida       : {'sim' if analysis.validation_result.is_valid else 'não'}")
print()
print(output["report"]["summary"])

result = analysis.validation_result
if result.errors:
    print(f"\nErros ({len(result.errors)}):")
    for e in result.errors:
        print(f"  [{e.severity.value:8s}] {e.type.value:20s} {e.message}")

if result.warnings:
    print(f"\nAvisos ({len(result.warnings)}):")
    for w in result.warnings:
        print(f"  {w.type.value:20s} {w.message}")

print("\nRecomendações:")
for r in output["report"]["recommendations"]:
    print(f"  - {r}")

print("=" * 70)
print(f"Output: {OUTPUT_FILE}")
print("=" * 70 + "\n")
