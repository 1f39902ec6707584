from app.modules.children.schemas import ChildSummary
from app.modules.medical_records.schemas import (
    MedicalRecordBrief, MedicalSummary, RecordTypeCount
)

def build_medical_summary(
    child: ChildSummary,
    counts_by_type: dict[str, int],
    recent,
    last_vaccination=None,
    last_checkup=None,
) -> MedicalSummary:
    """Counts ordered by frequency, then type name."""
    ordered = sorted(counts_by_type.items(), key=lambda kv: (-kv[1], kv[0]))
    return MedicalSummary(
        child=child,
        total_records=sum(counts_by_type.values()),
        records_by_type=[RecordTypeCount(record_type=t, count=n) for t, n in ordered],
        recent_records=[MedicalRecordBrief.model_validate(r) for r in recent],
        last_vaccination=MedicalRecordBrief.model_validate(last_vaccination) if last_vaccination else None,
        last_checkup=MedicalRecordBrief.model_validate(last_checkup) if last_checkup else None,
    )
