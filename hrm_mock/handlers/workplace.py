"""办公服务：报销与报销单、会议室与预订、差旅、问卷调查。"""
from __future__ import annotations

from ..core.routing import RequestContext, RouteTable
from ._crud import patch_record, register_crud, transition
from .machines import BOOKING, DRAFT, EXPENSE, PENDING, SUBMITTED, TRAVEL

routes = RouteTable("workplace")


# 报销
@routes.get("expenses/my")
def my_expenses(ctx: RequestContext):
    return ctx.store.filter("expenses", employeeId=ctx.user_id)


@routes.get("expenses/reports")
def list_expense_reports(ctx: RequestContext):
    return ctx.store.collection("expenseReports")


@routes.post("expenses/reports")
def create_expense_report(ctx: RequestContext):
    return ctx.store.create("expenseReports", ctx.data, overrides={
        "employeeId": ctx.user_id, "status": SUBMITTED, "submittedAt": ctx.store.timestamp(),
    })


@routes.post("expenses/<expense_id>/submit")
def submit_expense(ctx: RequestContext, expense_id: str):
    return transition(ctx, "expenses", expense_id, "Expense", EXPENSE, "submit",
                      {"submittedAt": ctx.store.timestamp()})


@routes.post("expenses/<expense_id>/approve")
def approve_expense(ctx: RequestContext, expense_id: str):
    return transition(ctx, "expenses", expense_id, "Expense", EXPENSE, "approve",
                      {"approvedBy": ctx.user_id, "approvedAt": ctx.store.timestamp()})


@routes.post("expenses/<expense_id>/reject")
def reject_expense(ctx: RequestContext, expense_id: str):
    return transition(ctx, "expenses", expense_id, "Expense", EXPENSE, "reject",
                      {"rejectedReason": ctx.data.get("reason")})


register_crud(routes, ["expenses"], "expenses", "Expense",
              overrides=lambda ctx: {"employeeId": ctx.user_id, "status": DRAFT}, machine=EXPENSE)


# 会议室与预订
register_crud(routes, ["facilities/rooms"], "conferenceRooms", "Room", overrides=lambda ctx: {"isActive": True})


@routes.get("facilities/my/bookings")
def my_bookings(ctx: RequestContext):
    return ctx.store.filter("roomBookings", employeeId=ctx.user_id)


@routes.post("facilities/bookings")
def create_booking(ctx: RequestContext):
    room = ctx.store.require("conferenceRooms", ctx.data.get("roomId"), "Room")
    return ctx.store.create("roomBookings", ctx.data, overrides={
        "employeeId": ctx.user_id, "status": PENDING, "room": ctx.store.snapshot("conferenceRooms", room["id"]),
    })


@routes.patch("facilities/bookings/<booking_id>")
def patch_booking(ctx: RequestContext, booking_id: str):
    record = ctx.store.require("roomBookings", booking_id, "Booking")
    patch = dict(ctx.data)
    if "roomId" in patch and patch["roomId"] != record.get("roomId"):
        ctx.store.require("conferenceRooms", patch["roomId"], "Room")
        patch["room"] = ctx.store.snapshot("conferenceRooms", patch["roomId"])
    return patch_record(ctx, "roomBookings", booking_id, "Booking", BOOKING, patch=patch)


@routes.post("facilities/bookings/<booking_id>/approve")
def approve_booking(ctx: RequestContext, booking_id: str):
    return transition(ctx, "roomBookings", booking_id, "Booking", BOOKING, "approve",
                      {"approvedBy": ctx.user_id, "approvedAt": ctx.store.timestamp()})


register_crud(routes, ["facilities/bookings"], "roomBookings", "Booking", methods=("LIST", "GET", "DELETE"))


# 差旅
@routes.get("travel/my")
def my_travel(ctx: RequestContext):
    return ctx.store.filter("travelRequests", employeeId=ctx.user_id)


@routes.post("travel/<travel_id>/submit")
def submit_travel(ctx: RequestContext, travel_id: str):
    return transition(ctx, "travelRequests", travel_id, "Travel request", TRAVEL, "submit",
                      {"submittedAt": ctx.store.timestamp()})


@routes.post("travel/<travel_id>/approve")
def approve_travel(ctx: RequestContext, travel_id: str):
    return transition(ctx, "travelRequests", travel_id, "Travel request", TRAVEL, "approve",
                      {"approvedBy": ctx.user_id, "approvedAt": ctx.store.timestamp()})


register_crud(routes, ["travel"], "travelRequests", "Travel request",
              overrides=lambda ctx: {"employeeId": ctx.user_id, "status": DRAFT}, machine=TRAVEL)


# 问卷
@routes.get("surveys/available")
def available_surveys(ctx: RequestContext):
    """进行中（ACTIVE）且当前时间落在起止时间内的问卷。"""
    now = ctx.store.now().strftime("%Y-%m-%dT%H:%M:%S")
    return [s for s in ctx.store.filter("surveys", status="ACTIVE")
            if str(s.get("startDate") or "") <= now <= str(s.get("endDate") or "9999")]


@routes.get("surveys/my/responses")
def my_survey_responses(ctx: RequestContext):
    return ctx.store.filter("surveyResponses", employeeId=ctx.user_id)


@routes.post("surveys/<survey_id>/responses")
def submit_response(ctx: RequestContext, survey_id: str):
    survey = ctx.store.require("surveys", survey_id, "Survey")
    return ctx.store.create("surveyResponses", ctx.data, defaults={"employeeId": ctx.user_id}, overrides={
        "surveyId": survey["id"], "submittedAt": ctx.store.timestamp(),
    })


@routes.get("surveys/<survey_id>/results")
def survey_results(ctx: RequestContext, survey_id: str):
    survey = ctx.store.require("surveys", survey_id, "Survey")
    responses = ctx.store.filter("surveyResponses", surveyId=survey["id"])
    return {"surveyId": survey["id"], "totalResponses": len(responses), "responses": responses}


register_crud(routes, ["surveys"], "surveys", "Survey",
              overrides=lambda ctx: {"status": DRAFT, "createdBy": ctx.user_id})
