"""FastAPI server exposing the wardrobe and recommendation tools."""

from __future__ import annotations

from typing import Any, Dict, List

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from logic.validation import (
    ColorProfileRequest,
    GapRecommendationRequest,
    HarmonyRequest,
    ItemRecommendationRequest,
    OccasionRecommendationRequest,
    RecommendationRequest,
    SeasonRecommendationRequest,
    StyleProfileRequest,
    StyleRecommendationRequest,
    WardrobeItemInput,
    WeatherRecommendationRequest,
)
from models.errors import WardrobeItemNotFound, WardrobeStylistError
from stylist_app.app import WardrobeStylistApp


def create_app(stylist: WardrobeStylistApp | None = None) -> FastAPI:
    """Build the FastAPI application around a :class:`WardrobeStylistApp`."""

    stylist = stylist or WardrobeStylistApp()
    app = FastAPI(title="Wardrobe Stylist", version="0.1.0")
    app.state.stylist = stylist
    wardrobe = stylist.wardrobe_tools
    recommendations = stylist.recommendation_tools

    @app.exception_handler(WardrobeItemNotFound)
    async def _not_found(request: Request, exc: WardrobeItemNotFound) -> JSONResponse:
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(WardrobeStylistError)
    async def _domain_error(request: Request, exc: WardrobeStylistError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.get("/healthz")
    def healthcheck() -> dict:
        """Lightweight readiness check."""

        return {
            "status": "ok",
            "service": "wardrobe-stylist",
            "environment": stylist.config.environment or "local",
        }

    @app.post("/wardrobe/{user_id}/items", status_code=201)
    def add_item(user_id: str, item: WardrobeItemInput) -> Dict[str, Any]:
        try:
            return wardrobe.add_wardrobe_item(user_id=user_id, item_data=item.model_dump())
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc

    @app.get("/wardrobe/{user_id}/items")
    def list_items(user_id: str) -> List[Dict[str, Any]]:
        return wardrobe.list_wardrobe_items(user_id=user_id)

    @app.post("/profile/colors")
    def color_profile(request: ColorProfileRequest) -> Dict[str, Any]:
        return recommendations.color_profile(
            skin_tone=request.skin_tone, hair_color=request.hair_color, eye_color=request.eye_color
        )

    @app.post("/profile/style")
    def style_profile(request: StyleProfileRequest) -> Dict[str, Any]:
        return recommendations.style_profile(
            gender=request.gender,
            height_cm=request.height_cm,
            weight_kg=request.weight_kg,
            measurements=request.measurements,
        )

    @app.post("/colors/harmony")
    def color_harmony(request: HarmonyRequest) -> Dict[str, Any]:
        return recommendations.color_harmony(
            base_color=request.base_color,
            harmony=request.harmony,
            candidate_colors=request.candidate_colors,
            max_distance=request.max_distance,
        )

    @app.post("/recommendations")
    def generate(request: RecommendationRequest) -> List[Dict[str, Any]]:
        return recommendations.generate(user_id=request.user_id, count=request.count)

    @app.post("/recommendations/item")
    def for_item(request: ItemRecommendationRequest) -> Dict[str, Any]:
        return recommendations.for_item(user_id=request.user_id, item_id=request.item_id)

    @app.post("/recommendations/occasion")
    def for_occasion(request: OccasionRecommendationRequest) -> List[Dict[str, Any]]:
        return recommendations.for_occasion(
            user_id=request.user_id, occasion=request.occasion, count=request.count
        )

    @app.post("/recommendations/season")
    def for_season(request: SeasonRecommendationRequest) -> List[Dict[str, Any]]:
        return recommendations.for_season(user_id=request.user_id, season=request.season, count=request.count)

    @app.post("/recommendations/style")
    def for_style(request: StyleRecommendationRequest) -> List[Dict[str, Any]]:
        return recommendations.for_style(user_id=request.user_id, style=request.style, count=request.count)

    @app.post("/recommendations/weather")
    def for_weather(request: WeatherRecommendationRequest) -> List[Dict[str, Any]]:
        return recommendations.for_weather(
            user_id=request.user_id, temperature=request.temperature, conditions=request.conditions
        )

    @app.post("/recommendations/gaps")
    def fill_gaps(request: GapRecommendationRequest) -> List[Dict[str, Any]]:
        return recommendations.fill_gaps(user_id=request.user_id, item_id=request.item_id, count=request.count)

    return app


def get_app() -> FastAPI:
    """Expose a FastAPI instance for ASGI servers."""

    return create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("server.api:get_app", factory=True, host="0.0.0.0", port=8080, reload=False)
