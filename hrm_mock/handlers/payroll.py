"""
薪资：薪资周期（计算/审批/处理/关闭、通知、审批单、报表）、仪表盘统计、薪资单与批量处理。
周期状态：DRAFT -> CALCULATED -> APPROVED -> PROCESSED -> CLOSED，calculate 可重复执行以重算合计。
"""
from __future__ import annotations

from typing import List

from ..core.audit import human_audit
from ..core.routing import RequestContext, RouteTable
from ._crud import patch_record, transition
from .machines import APPROVED, CALCULATED, DRAFT, PAYROLL_CYCLE, PAYROLL_RECORD, PENDING

routes = RouteTable("payroll")

DEFAULT_SALARY = 5000

REPORT_CONTENT_TYPES = {
    "PDF": ("pdf", "application/pdf"),
    "EXCEL": ("xlsx", "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"),
    "CSV": ("csv", "text/csv"),
    "TXT": ("txt", "text/plain"),
}


def _cycle(ctx: RequestContext, cycle_id: str) -> dict:
    return ctx.store.require("payrollCycles", cycle_id, "Payroll cycle")


def _by_period_desc(records: List[dict]) -> List[dict]:
    return sorted(records, key=lambda p: p.get("period") or "", reverse=True)


# 周期：列表与创建
@routes.get("payroll/cycles")
def list_cycles(ctx: RequestContext):
    return ctx.store.collection("payrollCycles")


@routes.post("payroll/cycles")
def create_cycle(ctx: RequestContext):
    return ctx.store.create("payrollCycles", ctx.data, front=True, overrides={
        "status": DRAFT,
        "totalEmployees": len(ctx.store.collection("employees")),
        "totalGross": 0,
        "totalDeductions": 0,
        "totalNet": 0,
    })


@routes.get("payroll/dashboard/stats")
def dashboard_stats(ctx: RequestContext):
    cycles = ctx.store.collection("payrollCycles")
    current = cycles[0] if cycles else None
    return {
        "currentCycle": current,
        "totalEmployees": len(ctx.store.collection("employees")),
        "pendingApprovals": len(ctx.store.filter("payrollApprovals", status=PENDING)),
        "thisMonthGross": current.get("totalGross", 0) if current else 0,
        "thisMonthNet": current.get("totalNet", 0) if current else 0,
    }


@routes.get("payroll/my/payslips")
def my_payslips(ctx: RequestContext):
    return _by_period_desc(ctx.store.filter("payrolls", employeeId=ctx.user_id))


@routes.get("payroll/cycles/<cycle_id>")
def get_cycle(ctx: RequestContext, cycle_id: str):
    return _cycle(ctx, cycle_id)


@routes.patch("payroll/cycles/<cycle_id>")
def patch_cycle(ctx: RequestContext, cycle_id: str):
    return patch_record(ctx, "payrollCycles", cycle_id, "Payroll cycle", PAYROLL_CYCLE)


@routes.get("payroll/cycles/<cycle_id>/departments")
def cycle_departments(ctx: RequestContext, cycle_id: str):
    _cycle(ctx, cycle_id)
    return [{**d, "department": ctx.store.find("departments", d.get("departmentId"))}
            for d in ctx.store.filter("departmentPayrollSummaries", payrollCycleId=cycle_id)]


@routes.get("payroll/cycles/<cycle_id>/cost-centers")
def cycle_cost_centers(ctx: RequestContext, cycle_id: str):
    _cycle(ctx, cycle_id)
    return ctx.store.filter("costCenterPayrollSummaries", payrollCycleId=cycle_id)


@routes.get("payroll/cycles/<cycle_id>/employees")
def cycle_employees(ctx: RequestContext, cycle_id: str):
    _cycle(ctx, cycle_id)
    return [{**d, "employee": ctx.store.find("employees", d.get("employeeId"))}
            for d in ctx.store.filter("employeePayrollDetails", payrollCycleId=cycle_id)]


@routes.get("payroll/cycles/<cycle_id>/approvals")
def cycle_approvals(ctx: RequestContext, cycle_id: str):
    _cycle(ctx, cycle_id)
    return ctx.store.filter("payrollApprovals", payrollCycleId=cycle_id)


@routes.get("payroll/cycles/<cycle_id>/notifications")
def cycle_notifications(ctx: RequestContext, cycle_id: str):
    _cycle(ctx, cycle_id)
    return ctx.store.filter("payrollNotifications", payrollCycleId=cycle_id)


@routes.get("payroll/cycles/<cycle_id>/reports")
def cycle_reports(ctx: RequestContext, cycle_id: str):
    _cycle(ctx, cycle_id)
    return ctx.store.filter("payrollReports", payrollCycleId=cycle_id)


# 周期：状态动作
def _ensure_details(ctx: RequestContext, cycle_id: str) -> List[dict]:
    """周期无员工明细时，按在职员工薪资生成一份（无扣款）。"""
    details = ctx.store.filter("employeePayrollDetails", payrollCycleId=cycle_id)
    if details:
        return details
    for e in ctx.store.collection("employees"):
        salary = e.get("salary") or DEFAULT_SALARY
        details.append(ctx.store.create("employeePayrollDetails", stamp=False, overrides={
            "payrollCycleId": cycle_id, "employeeId": e["id"], "departmentId": e.get("departmentId"),
            "baseSalary": salary, "grossSalary": salary, "totalDeductions": 0, "netSalary": salary,
            "status": CALCULATED,
        }))
    return details


@routes.post("payroll/cycles/<cycle_id>/calculate")
def calculate_cycle(ctx: RequestContext, cycle_id: str):
    cycle = _cycle(ctx, cycle_id)
    before = cycle.get("status")
    cycle["status"] = PAYROLL_CYCLE.next_state(before, "calculate")
    details = _ensure_details(ctx, cycle_id)
    cycle["totalEmployees"] = len(details)
    cycle["totalGross"] = sum(d.get("grossSalary") or 0 for d in details)
    cycle["totalDeductions"] = sum(d.get("totalDeductions") or 0 for d in details)
    cycle["totalNet"] = sum(d.get("netSalary") or 0 for d in details)
    cycle["calculatedAt"] = ctx.store.timestamp()
    ctx.store.touch(cycle)
    human_audit(ctx.user_id, cycle["updatedAt"], f"计算了薪资周期 {cycle_id}（{before} -> {cycle['status']}），实发合计 {cycle['totalNet']}")
    return cycle


@routes.post("payroll/cycles/<cycle_id>/approve")
def approve_cycle(ctx: RequestContext, cycle_id: str):
    before = _cycle(ctx, cycle_id).get("status")
    cycle = transition(ctx, "payrollCycles", cycle_id, "Payroll cycle", PAYROLL_CYCLE, "approve",
                       {"approvedAt": ctx.store.timestamp(), "approvedBy": ctx.user_id})
    if cycle["status"] != before:
        for a in ctx.store.filter("payrollApprovals", payrollCycleId=cycle_id, status=PENDING):
            a["status"] = APPROVED
            a["approvedAt"] = cycle["approvedAt"]
    return cycle


@routes.post("payroll/cycles/<cycle_id>/process")
def process_cycle(ctx: RequestContext, cycle_id: str):
    return transition(ctx, "payrollCycles", cycle_id, "Payroll cycle", PAYROLL_CYCLE, "process",
                      {"processedAt": ctx.store.timestamp()})


@routes.post("payroll/cycles/<cycle_id>/close")
def close_cycle(ctx: RequestContext, cycle_id: str):
    return transition(ctx, "payrollCycles", cycle_id, "Payroll cycle", PAYROLL_CYCLE, "close",
                      {"closedAt": ctx.store.timestamp()})


def _notify(ctx: RequestContext, cycle_id: str, recipient_type: str, subject: str, message: str) -> dict:
    ts = ctx.store.timestamp()
    return ctx.store.create("payrollNotifications", stamp=False, overrides={
        "payrollCycleId": cycle_id, "recipientType": recipient_type, "subject": subject,
        "message": message, "sentAt": ts, "createdAt": ts,
    })


@routes.post("payroll/cycles/<cycle_id>/notify-finance")
def notify_finance(ctx: RequestContext, cycle_id: str):
    _cycle(ctx, cycle_id)
    return _notify(ctx, cycle_id, "FINANCE", "Payroll - Ready for Payment",
                   ctx.data.get("message") or "The payroll has been approved and is ready for payment.")


@routes.post("payroll/cycles/<cycle_id>/notify-controllers")
def notify_controllers(ctx: RequestContext, cycle_id: str):
    _cycle(ctx, cycle_id)
    return [_notify(ctx, cycle_id, "CONTROLLER", "Payroll - Awaiting Review",
                    ctx.data.get("message") or "The payroll is awaiting review and approval.")]


@routes.post("payroll/cycles/<cycle_id>/approvals")
def request_approval(ctx: RequestContext, cycle_id: str):
    _cycle(ctx, cycle_id)
    return ctx.store.create("payrollApprovals", stamp=False, overrides={
        "payrollCycleId": cycle_id,
        "approverId": ctx.data.get("approverId") or ctx.user_id,
        "status": PENDING,
        "comments": ctx.data.get("comments"),
        "createdAt": ctx.store.timestamp(),
    })


@routes.post("payroll/cycles/<cycle_id>/reports")
def generate_report(ctx: RequestContext, cycle_id: str):
    _cycle(ctx, cycle_id)
    return ctx.store.create("payrollReports", stamp=False, overrides={
        "payrollCycleId": cycle_id,
        "reportType": ctx.data.get("reportType") or "SUMMARY",
        "format": ctx.data.get("format") or "PDF",
        "generatedAt": ctx.store.timestamp(),
        "generatedBy": ctx.user_id,
    })


@routes.get("payroll/reports/<report_id>/download")
def download_report(ctx: RequestContext, report_id: str):
    report = ctx.store.require("payrollReports", report_id, "Report")
    ext, content_type = REPORT_CONTENT_TYPES.get(str(report.get("format")).upper(), REPORT_CONTENT_TYPES["TXT"])
    return {
        "fileName": f"payroll-report-{report['id']}.{ext}",
        "contentType": content_type,
        "content": f"Payroll report {report.get('reportType')} for cycle {report.get('payrollCycleId')}",
    }


# 个人薪资记录
@routes.get("payroll")
def list_payrolls(ctx: RequestContext):
    records = ctx.store.filter("payrolls", employeeId=ctx.arg("employeeId"), status=ctx.arg("status"))
    period = ctx.arg("period")
    if period:
        records = [p for p in records if str(p.get("period") or "").startswith(str(period))]
    return records


@routes.post("payroll/process")
def process_payrolls(ctx: RequestContext):
    """按员工逐一生成当期薪资记录（CALCULATED）。"""
    period = ctx.data.get("period") or ctx.store.today()[:7]
    created = []
    for e in ctx.store.collection("employees"):
        salary = e.get("salary") or DEFAULT_SALARY
        created.append(ctx.store.create("payrolls", overrides={
            "employeeId": e["id"], "period": period, "baseSalary": salary, "items": [],
            "grossSalary": salary, "totalDeductions": 0, "netSalary": salary, "status": CALCULATED,
        }))
    human_audit(ctx.user_id, ctx.store.timestamp(), f"批量处理了 {period} 期薪资，共 {len(created)} 条")
    return created


@routes.get("payroll/<payroll_id>")
def get_payroll(ctx: RequestContext, payroll_id: str):
    return ctx.store.require("payrolls", payroll_id, "Payroll")


@routes.get("payroll/<payroll_id>/payslip")
def payslip(ctx: RequestContext, payroll_id: str):
    record = ctx.store.require("payrolls", payroll_id, "Payroll")
    items = record.get("items") or []
    return {
        "payroll": record,
        "employee": ctx.store.find("employees", record.get("employeeId")),
        "earnings": [i for i in items if i.get("type") == "EARNING"],
        "deductions": [i for i in items if i.get("type") == "DEDUCTION"],
    }


@routes.post("payroll")
def create_payroll(ctx: RequestContext):
    return ctx.store.create("payrolls", ctx.data, overrides={"status": DRAFT})


@routes.patch("payroll/<payroll_id>")
def patch_payroll(ctx: RequestContext, payroll_id: str):
    return patch_record(ctx, "payrolls", payroll_id, "Payroll", PAYROLL_RECORD)


@routes.post("payroll/<payroll_id>/approve")
def approve_payroll(ctx: RequestContext, payroll_id: str):
    return transition(ctx, "payrolls", payroll_id, "Payroll", PAYROLL_RECORD, "approve",
                      {"approvedAt": ctx.store.timestamp(), "approvedBy": ctx.user_id})


def _record_totals(record: dict) -> dict:
    """按明细重算单条薪资；无收入项时以基本工资为应发。"""
    items = record.get("items") or []
    earnings = [i.get("amount") or 0 for i in items if i.get("type") == "EARNING"]
    deductions = sum(i.get("amount") or 0 for i in items if i.get("type") == "DEDUCTION")
    gross = sum(earnings) if earnings else (record.get("baseSalary") or 0)
    return {"grossSalary": gross, "totalDeductions": deductions, "netSalary": gross - deductions}


@routes.post("payroll/<payroll_id>/calculate")
def calculate_payroll(ctx: RequestContext, payroll_id: str):
    record = ctx.store.require("payrolls", payroll_id, "Payroll")
    extra = _record_totals(record)
    extra["calculatedAt"] = ctx.store.timestamp()
    return transition(ctx, "payrolls", payroll_id, "Payroll", PAYROLL_RECORD, "calculate", extra)


@routes.post("payroll/<payroll_id>/process")
def process_payroll(ctx: RequestContext, payroll_id: str):
    return transition(ctx, "payrolls", payroll_id, "Payroll", PAYROLL_RECORD, "process",
                      {"processedAt": ctx.store.timestamp()})


@routes.post("payroll/<payroll_id>/pay")
def pay_payroll(ctx: RequestContext, payroll_id: str):
    return transition(ctx, "payrolls", payroll_id, "Payroll", PAYROLL_RECORD, "pay",
                      {"paidAt": ctx.store.timestamp()})
