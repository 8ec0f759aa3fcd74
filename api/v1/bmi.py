# api/v1/bmi.py
from __future__ import annotations

from fastapi import APIRouter, Depends, status

from core.bmi import compute_bmi
from core.health_tips import BmiTipsContext, get_recommendations
from core.units import normalize_measurements
from services.gemini import TextGenerator
from services.store import MemStore
from api.v1.deps import get_generator, get_store
from api.v1.schemas import BmiRecordOut, BmiRequest

router = APIRouter()


@router.post(
    "",
    response_model=BmiRecordOut,
    status_code=status.HTTP_200_OK,
    summary="Calculate BMI, attach recommendations and store the record",
)
async def calculate_bmi(
    body: BmiRequest,
    store: MemStore = Depends(get_store),
    generate: TextGenerator = Depends(get_generator),
) -> BmiRecordOut:
    # MissingInput / InvalidInput stop the pipeline before anything is stored
    measured = normalize_measurements(
        height_cm=body.height,
        height_feet=body.height_feet,
        height_inches=body.height_inches,
        weight_kg=body.weight,
        weight_lbs=body.weight_lbs,
        age=body.age,
        gender=body.gender,
    )
    result = compute_bmi(measured.height_cm, measured.weight_kg)

    recommendations = await get_recommendations(
        BmiTipsContext(
            bmi=result.bmi,
            category=result.category.value,
            age=measured.age,
            gender=measured.gender,
        ),
        generate,
    )

    record = store.create_bmi_record(
        height=measured.height_cm,
        weight=measured.weight_kg,
        result=result,
        recommendations=recommendations,
        user_id=body.user_id,
    )
    return BmiRecordOut.model_validate(record, from_attributes=True)


@router.get(
    "/{user_id}",
    response_model=list[BmiRecordOut],
    summary="List all BMI records for a user",
)
async def list_user_records(
    user_id: str,
    store: MemStore = Depends(get_store),
) -> list[BmiRecordOut]:
    return [
        BmiRecordOut.model_validate(r, from_attributes=True)
        for r in store.get_bmi_records_by_user(user_id)
    ]
