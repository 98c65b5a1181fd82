"""招聘：职位、候选人（流水线状态动作）、申请、看板与流水线配置。"""
from __future__ import annotations

from ..core.errors import RouteNotFoundError
from ..core.routing import RequestContext, RouteTable
from ..core.seed import default_pipeline_config
from ._crud import patch_record, register_crud, transition
from .machines import CANDIDATE, CANDIDATE_STAGES, DRAFT, PENDING

routes = RouteTable("recruitment")


# 职位
register_crud(routes, ["recruitment/jobs"], "jobs", "Job",
              defaults={"status": DRAFT}, overrides=lambda ctx: {"postedAt": ctx.store.timestamp()})


@routes.post("recruitment/jobs/<job_id>/apply")
def apply(ctx: RequestContext, job_id: str):
    """投递：生成一条申请记录，同时为当前用户创建 NEW 状态的候选人。"""
    job = ctx.store.require("jobs", job_id, "Job")
    applied_at = ctx.store.timestamp()
    application = ctx.store.create("applications", ctx.data,
                                   defaults={"candidateId": ctx.user_id, "status": PENDING},
                                   overrides={"jobId": job["id"], "appliedAt": applied_at})
    me = ctx.store.find("employees", ctx.user_id) or {}
    candidate = ctx.store.create("candidates", overrides={
        "name": me.get("name") or "Current User",
        "email": me.get("email") or "user@example.com",
        "jobId": job["id"],
        "status": "NEW",
        "appliedAt": applied_at,
    })
    application["candidateRecordId"] = candidate["id"]
    return application


# 候选人
@routes.get("recruitment/candidates")
def list_candidates(ctx: RequestContext):
    return ctx.store.filter("candidates", jobId=ctx.arg("jobId"))


@routes.get("recruitment/candidates/<candidate_id>")
def get_candidate(ctx: RequestContext, candidate_id: str):
    return ctx.store.require("candidates", candidate_id, "Candidate")


@routes.post("recruitment/candidates")
def create_candidate(ctx: RequestContext):
    return ctx.store.create("candidates", ctx.data, overrides={"status": "NEW", "appliedAt": ctx.store.timestamp()})


@routes.patch("recruitment/candidates/<candidate_id>")
def patch_candidate(ctx: RequestContext, candidate_id: str):
    return patch_record(ctx, "candidates", candidate_id, "Candidate", CANDIDATE)


@routes.post("recruitment/candidates/<candidate_id>/<action>")
def candidate_action(ctx: RequestContext, candidate_id: str, action: str):
    if action not in CANDIDATE.actions:
        raise RouteNotFoundError(ctx.path)
    return transition(ctx, "candidates", candidate_id, "Candidate", CANDIDATE, action,
                      {"stageChangedAt": ctx.store.timestamp()})


# 申请
@routes.get("recruitment/applications")
def list_applications(ctx: RequestContext):
    return ctx.store.filter("applications", jobId=ctx.arg("jobId"))


@routes.get("recruitment/my/applications")
def my_applications(ctx: RequestContext):
    return ctx.store.filter("applications", candidateId=ctx.user_id)


# 看板
@routes.get("recruitment/pipeline")
def pipeline(ctx: RequestContext):
    """按阶段分桶的候选人看板，可按 jobId 过滤。"""
    candidates = ctx.store.filter("candidates", jobId=ctx.arg("jobId"))
    return {stage.lower(): [c for c in candidates if c.get("status") == stage] for stage in CANDIDATE_STAGES}


def _initialize(ctx: RequestContext):
    config = ctx.store.find("pipelineConfigs", "default")
    if config is None:
        config = default_pipeline_config()
        config["createdAt"] = config["updatedAt"] = ctx.store.timestamp()
        ctx.store.collection("pipelineConfigs").insert(0, config)
    return {"success": True, "message": "Pipeline initialized successfully", "config": config}


routes.add("GET", "recruitment/pipeline/initialize", _initialize)
routes.add("POST", "recruitment/pipeline/initialize", _initialize)

register_crud(routes, ["recruitment/pipeline/configs"], "pipelineConfigs", "Pipeline config",
              defaults={"stages": [], "defaultStages": []})
