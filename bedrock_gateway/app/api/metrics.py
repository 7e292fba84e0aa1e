from fastapi import APIRouter, Request

router = APIRouter()


@router.get("/metrics")
async def get_metrics(request: Request) -> dict:
    return request.app.state.metrics.get_metrics()
