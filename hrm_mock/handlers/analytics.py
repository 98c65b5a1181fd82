"""分析与洞察：概览（由存储实时计算）、趋势、员工/团队/部门洞察、预测、DEIB、人力监控、聊天助手。"""
from __future__ import annotations

from datetime import date, timedelta
from typing import List

from ..core.routing import RequestContext, RouteTable

routes = RouteTable("analytics")

RECENT_HIRE_DAYS = 183
CHATBOT_REPLY = "This is a mocked chatbot response. The mock backend is working!"


def _average_rating(reviews: List[dict]) -> float:
    ratings = [r.get("overallRating") or 0 for r in reviews]
    return sum(ratings) / len(ratings) if ratings else 0


def _reviews_for(ctx: RequestContext, employee_ids) -> List[dict]:
    ids = {str(i) for i in employee_ids}
    return [r for r in ctx.store.collection("performanceReviews") if str(r.get("employeeId")) in ids]


@routes.get("analytics/overview")
def overview(ctx: RequestContext):
    store = ctx.store
    employees = store.collection("employees")
    since = (date.fromisoformat(store.today()) - timedelta(days=RECENT_HIRE_DAYS)).isoformat()
    return {
        "totalEmployees": len(employees),
        "activeEmployees": len(store.filter("employees", status="ACTIVE")),
        "totalDepartments": len(store.collection("departments")),
        "totalProjects": len(store.collection("projects")),
        "activeProjects": len(store.filter("projects", status="IN_PROGRESS")),
        "totalTrainings": len(store.collection("trainings")),
        "pendingLeaves": len(store.filter("leaveRequests", status="PENDING")),
        "averagePerformance": _average_rating(store.collection("performanceReviews")),
        "recentHires": sum(1 for e in employees if str(e.get("hireDate") or "")[:10] >= since),
    }


@routes.get("analytics/performance-trend")
def performance_trend(ctx: RequestContext):
    return ctx.store.singleton("performanceTrend").get("points", [])


@routes.get("analytics/employee/<employee_id>")
def employee_analytics(ctx: RequestContext, employee_id: str):
    employee = ctx.store.require("employees", employee_id, "Employee")
    goals = ctx.store.filter("goals", employeeId=employee_id)
    reviews = ctx.store.filter("performanceReviews", employeeId=employee_id)
    return {
        "employee": employee,
        "goals": {
            "total": len(goals),
            "completed": sum(1 for g in goals if g.get("status") == "COMPLETED"),
            "inProgress": sum(1 for g in goals if g.get("status") == "IN_PROGRESS"),
        },
        "performance": {"averageRating": _average_rating(reviews), "totalReviews": len(reviews)},
    }


@routes.get("analytics/predictive")
def predictive(ctx: RequestContext):
    return {**ctx.store.singleton("analyticsPredictive"), "lastUpdated": ctx.store.timestamp()}


@routes.get("analytics/deib")
def deib(ctx: RequestContext):
    return ctx.store.singleton("analyticsDeib")


@routes.get("analytics/workforce-monitoring")
def workforce_monitoring(ctx: RequestContext):
    return ctx.store.singleton("workforceMonitoring")


@routes.get("insights")
def list_insights(ctx: RequestContext):
    return ctx.store.filter("insights", type=ctx.arg("type"), priority=ctx.arg("priority"))


@routes.get("insights/<insight_id>")
def get_insight(ctx: RequestContext, insight_id: str):
    return ctx.store.require("insights", insight_id, "Insight")


@routes.get("performance-insights/employee/<employee_id>")
def employee_insights(ctx: RequestContext, employee_id: str):
    ctx.store.require("employees", employee_id, "Employee")
    reviews = ctx.store.filter("performanceReviews", employeeId=employee_id)
    avg = _average_rating(reviews)
    insights = []
    if avg >= 4:
        insights.append({"title": "Above-average performance", "type": "SUCCESS", "priority": "MEDIUM",
                         "description": "Employee shows consistent performance"})
    elif reviews:
        insights.append({"title": "Performance needs attention", "type": "WARNING", "priority": "HIGH",
                         "description": "Average rating is below target"})
    return {
        "employeeId": employee_id,
        "insights": insights,
        "trends": {"performance": [r.get("overallRating") for r in reviews]},
        "averageRating": avg,
    }


@routes.get("performance-insights/team/<team_id>")
def team_insights(ctx: RequestContext, team_id: str):
    """团队按直属上级划分：managerId 等于 team_id 的员工。"""
    members = ctx.store.filter("employees", managerId=team_id)
    return {
        "teamId": team_id,
        "metrics": {
            "teamSize": len(members),
            "averagePerformance": _average_rating(_reviews_for(ctx, [m["id"] for m in members])),
        },
    }


@routes.get("performance-insights/department/<department_id>")
def department_insights(ctx: RequestContext, department_id: str):
    ctx.store.require("departments", department_id, "Department")
    members = ctx.store.filter("employees", departmentId=department_id)
    return {
        "departmentId": department_id,
        "metrics": {
            "totalEmployees": len(members),
            "averagePerformance": _average_rating(_reviews_for(ctx, [m["id"] for m in members])),
        },
    }


@routes.post("chatbot/interact")
def chatbot_interact(ctx: RequestContext):
    return ctx.store.create("chatbotMessages", stamp=False, overrides={
        "userId": ctx.user_id,
        "message": ctx.data.get("message") or "",
        "response": CHATBOT_REPLY,
        "context": ctx.data.get("context") or ctx.arg("context"),
        "createdAt": ctx.store.timestamp(),
    })


@routes.post("chatbot/analyze-performance")
def chatbot_analyze(ctx: RequestContext):
    employee_id = str(ctx.data.get("employeeId") or ctx.arg("employeeId") or ctx.user_id)
    reviews = ctx.store.filter("performanceReviews", employeeId=employee_id)
    improvements = [i for r in reviews for i in (r.get("improvements") or [])]
    return {
        "employeeId": employee_id,
        "analysis": f"{len(reviews)} review(s) analyzed",
        "score": _average_rating(reviews),
        "recommendations": improvements or ["Keep up the current performance"],
    }


@routes.get("chatbot/chat")
def chatbot_chat(ctx: RequestContext):
    return {"response": CHATBOT_REPLY, "history": ctx.store.filter("chatbotMessages", userId=ctx.user_id)}
