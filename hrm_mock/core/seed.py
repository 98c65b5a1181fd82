"""
种子数据：每次调用构造一份全新的集合字典，供 HRMStore.reset() 使用。
日期均为固定的历史日期，保证测试可复现。
"""
from __future__ import annotations

import copy
from typing import Any, Dict, List

_SEED_TS = "2024-01-01T00:00:00.000Z"


def _employees() -> List[dict]:
    return [
        {
            "id": "1", "name": "João Silva", "email": "joao.silva@company.com",
            "position": "Senior Developer", "positionId": "1", "department": "IT", "departmentId": "1",
            "managerId": "2", "hireDate": "2020-01-15", "status": "ACTIVE", "avatar": "",
            "phone": "(11) 99999-9999", "salary": 8000, "skills": ["React", "TypeScript", "Node.js"],
            "createdAt": "2020-01-15T00:00:00.000Z", "updatedAt": "2024-01-15T00:00:00.000Z",
        },
        {
            "id": "2", "name": "Maria Santos", "email": "maria.santos@company.com",
            "position": "Project Manager", "positionId": "1", "department": "IT", "departmentId": "1",
            "managerId": None, "hireDate": "2019-03-20", "status": "ACTIVE", "avatar": "",
            "phone": "(11) 88888-8888", "salary": 12000, "skills": ["Management", "Scrum", "Agile"],
            "createdAt": "2019-03-20T00:00:00.000Z", "updatedAt": "2024-01-15T00:00:00.000Z",
        },
        {
            "id": "3", "name": "Pedro Oliveira", "email": "pedro.oliveira@company.com",
            "position": "Mid-level Developer", "positionId": "1", "department": "IT", "departmentId": "1",
            "managerId": "2", "hireDate": "2021-06-10", "status": "ACTIVE", "avatar": "",
            "phone": "(11) 77777-7777", "salary": 6000, "skills": ["Vue.js", "Python", "Django"],
            "createdAt": "2021-06-10T00:00:00.000Z", "updatedAt": "2024-01-15T00:00:00.000Z",
        },
    ]


def _payroll_items(*rows) -> List[dict]:
    return [{"id": str(i), "name": n, "type": t, "amount": a, "taxable": t == "EARNING"} for i, (n, t, a) in enumerate(rows, 1)]


def _payrolls() -> List[dict]:
    return [
        {"id": "1", "employeeId": "1", "period": "2024-02", "baseSalary": 12000, "grossSalary": 12500,
         "totalDeductions": 2500, "netSalary": 10000, "status": "PAID", "paidAt": "2024-02-28T10:00:00Z",
         "items": _payroll_items(("Base Salary", "EARNING", 12000), ("Overtime", "EARNING", 500),
                                 ("Social Security", "DEDUCTION", 1000), ("Income Tax", "DEDUCTION", 1500)),
         "createdAt": "2024-02-25T00:00:00.000Z", "updatedAt": "2024-02-28T00:00:00.000Z"},
        {"id": "2", "employeeId": "1", "period": "2024-01", "baseSalary": 12000, "grossSalary": 12000,
         "totalDeductions": 2400, "netSalary": 9600, "status": "PAID", "paidAt": "2024-01-30T10:00:00Z",
         "items": _payroll_items(("Base Salary", "EARNING", 12000), ("Social Security", "DEDUCTION", 1000),
                                 ("Income Tax", "DEDUCTION", 1400)),
         "createdAt": "2024-01-25T00:00:00.000Z", "updatedAt": "2024-01-30T00:00:00.000Z"},
        {"id": "3", "employeeId": "1", "period": "2023-11", "baseSalary": 12000, "grossSalary": 6000,
         "totalDeductions": 0, "netSalary": 6000, "status": "PAID", "paidAt": "2023-11-30T10:00:00Z",
         "items": _payroll_items(("13th Salary 1st Installment", "EARNING", 6000)),
         "createdAt": "2023-11-25T00:00:00.000Z", "updatedAt": "2023-11-30T00:00:00.000Z"},
        {"id": "4", "employeeId": "1", "period": "2024-03", "baseSalary": 12000, "grossSalary": 25000,
         "totalDeductions": 5000, "netSalary": 20000, "status": "PROCESSED", "paidAt": "2024-03-15T10:00:00Z",
         "items": _payroll_items(("Profit Sharing 2023", "EARNING", 25000), ("Income Tax on Profit Sharing", "DEDUCTION", 5000)),
         "createdAt": "2024-03-10T00:00:00.000Z", "updatedAt": "2024-03-10T00:00:00.000Z"},
    ]


def _pipeline_stages() -> List[dict]:
    rows = [
        ("new", "New", "Candidates who just applied", "bg-blue-100 border-blue-300"),
        ("screening", "Screening", "Initial resume review", "bg-yellow-100 border-yellow-300"),
        ("interview", "Interview", "Technical and behavioral interviews", "bg-purple-100 border-purple-300"),
        ("offer", "Offer", "Offer sent to the candidate", "bg-green-100 border-green-300"),
        ("hired", "Hired", "Candidate accepted the offer", "bg-emerald-100 border-emerald-300"),
    ]
    return [{"id": sid, "name": name, "description": desc, "order": i, "color": color, "isActive": True}
            for i, (sid, name, desc, color) in enumerate(rows, 1)]


def default_pipeline_config() -> dict:
    stages = _pipeline_stages()
    return {
        "id": "default", "name": "Default Pipeline",
        "description": "Default recruitment pipeline configuration",
        "stages": stages, "defaultStages": [s["id"] for s in stages],
        "createdAt": _SEED_TS, "updatedAt": _SEED_TS,
    }


def _analytics_singletons() -> Dict[str, dict]:
    return {
        "analyticsPredictive": {
            "flightRisk": [
                {"id": "1", "name": "João Silva", "department": "IT", "position": "Senior Developer", "riskScore": 75,
                 "reason": "Low job satisfaction, no promotion in 2 years", "lastReviewDate": "2024-01-15", "engagementScore": 3.2},
                {"id": "3", "name": "Pedro Oliveira", "department": "IT", "position": "Mid-level Developer", "riskScore": 65,
                 "reason": "Low participation in recent projects", "lastReviewDate": "2024-02-01", "engagementScore": 3.5},
            ],
            "highPerformers": [
                {"id": "2", "name": "Maria Santos", "department": "IT", "position": "Project Manager", "performanceScore": 9.2,
                 "strengths": ["Leadership", "Communication", "Team management"], "potential": "High potential for director",
                 "lastPromotionDate": "2023-06-01"},
            ],
            "turnoverPrediction": [
                {"period": "Next 3 months", "predictedRate": 12.5,
                 "factors": ["Low satisfaction", "Lack of growth", "Hot job market"]},
                {"period": "Next 6 months", "predictedRate": 18.3,
                 "factors": ["Seasonality", "Review cycle", "Job market"]},
            ],
        },
        "analyticsDeib": {
            "genderDistribution": [
                {"gender": "Male", "count": 18, "percentage": 60},
                {"gender": "Female", "count": 12, "percentage": 40},
            ],
            "ageDistribution": [
                {"ageGroup": "18-25", "count": 5, "percentage": 16.7},
                {"ageGroup": "26-35", "count": 15, "percentage": 50},
                {"ageGroup": "36-45", "count": 8, "percentage": 26.7},
                {"ageGroup": "46+", "count": 2, "percentage": 6.6},
            ],
            "payEquity": [
                {"category": "Gender", "gap": 8.5, "averageSalary": 8500, "benchmark": 9200},
                {"category": "Age", "gap": 5.2, "averageSalary": 8800, "benchmark": 9300},
            ],
            "genderDiversityIndex": 72.5, "payEquityIndex": 87.5, "inclusionScore": 7.8, "diverseLeadership": 35.0,
        },
        "workforceMonitoring": {
            "totalHeadcount": 30, "headcountChange": 3, "totalCost": 240000,
            "averageProductivity": 7.8, "averageUtilization": 82.5,
            "headcountTrend": [
                {"month": "2024-01", "count": 27, "change": 2},
                {"month": "2024-02", "count": 28, "change": 1},
                {"month": "2024-03", "count": 30, "change": 2},
            ],
            "capacityAnalysis": [
                {"department": "IT", "utilization": 85, "capacity": 100, "demand": 90},
                {"department": "HR", "utilization": 75, "capacity": 100, "demand": 80},
            ],
        },
        "performanceTrend": {
            "points": [
                {"month": "2024-01", "averageRating": 4.0},
                {"month": "2024-02", "averageRating": 4.2},
                {"month": "2024-03", "averageRating": 4.5},
            ],
        },
    }


def build_seed() -> Dict[str, Any]:
    """返回全部集合（list）与单例（dict）。"""
    employees = _employees()
    emp = {e["id"]: e for e in employees}
    leave_types = [
        {"id": "1", "name": "Vacation", "code": "VACATION", "maxDays": 30, "carryForward": True,
         "requiresApproval": True, "isActive": True},
        {"id": "2", "name": "Sick Leave", "code": "SICK_LEAVE", "carryForward": False,
         "requiresApproval": True, "isActive": True},
    ]
    projects = [
        {"id": "1", "name": "People Analytics Platform", "description": "Analytics platform for people management",
         "status": "IN_PROGRESS", "startDate": "2024-01-01", "endDate": "2024-12-31",
         "createdAt": _SEED_TS, "updatedAt": _SEED_TS},
    ]
    benefits = [
        {"id": "1", "name": "Health Plan", "type": "HEALTH", "provider": "Unimed", "monthlyCost": 450,
         "employeeContribution": 90, "isActive": True, "createdAt": _SEED_TS, "updatedAt": _SEED_TS},
        {"id": "2", "name": "Dental Plan", "type": "DENTAL", "provider": "OdontoPrev", "monthlyCost": 60,
         "employeeContribution": 15, "isActive": True, "createdAt": _SEED_TS, "updatedAt": _SEED_TS},
        {"id": "3", "name": "Meal Voucher", "type": "MEAL", "provider": "Alelo", "monthlyCost": 800,
         "employeeContribution": 0, "isActive": True, "createdAt": _SEED_TS, "updatedAt": _SEED_TS},
    ]
    contractors = [
        {"id": "1", "name": "TechStaff Services", "cnpj": "12.345.678/0001-90", "contactName": "Ana Costa",
         "email": "contato@techstaff.com", "isActive": True, "createdAt": _SEED_TS, "updatedAt": _SEED_TS},
    ]
    rooms = [
        {"id": "1", "name": "Meeting Room A", "capacity": 10, "location": "1st Floor",
         "amenities": ["Projector", "Wi-Fi", "Air conditioning"], "isActive": True,
         "createdAt": _SEED_TS, "updatedAt": _SEED_TS},
        {"id": "2", "name": "Meeting Room B", "capacity": 20, "location": "2nd Floor",
         "amenities": ["Projector", "Wi-Fi", "Air conditioning", "Video conferencing"], "isActive": True,
         "createdAt": _SEED_TS, "updatedAt": _SEED_TS},
    ]

    data: Dict[str, Any] = {
        "employees": employees,
        "departments": [
            {"id": "1", "name": "Information Technology", "description": "IT Department", "managerId": "2",
             "createdAt": "2020-01-01T00:00:00.000Z", "updatedAt": _SEED_TS},
            {"id": "2", "name": "Human Resources", "description": "HR Department", "managerId": None,
             "createdAt": "2020-01-01T00:00:00.000Z", "updatedAt": _SEED_TS},
        ],
        "positions": [
            {"id": "1", "title": "Full Stack Developer", "description": "Developer", "level": "MID",
             "departmentId": "1", "createdAt": _SEED_TS, "updatedAt": _SEED_TS},
            {"id": "2", "title": "HR Analyst", "description": "Analyst", "level": "JUNIOR",
             "departmentId": "2", "createdAt": _SEED_TS, "updatedAt": _SEED_TS},
        ],
        "skills": [
            {"id": "1", "name": "React", "description": "JavaScript library", "type": "HARD",
             "category": "TECHNICAL", "defaultLevel": "ADVANCED", "createdAt": _SEED_TS, "updatedAt": _SEED_TS},
            {"id": "2", "name": "TypeScript", "description": "JavaScript superset", "type": "HARD",
             "category": "TECHNICAL", "defaultLevel": "ADVANCED", "createdAt": _SEED_TS, "updatedAt": _SEED_TS},
        ],
        "projects": projects,
        "projectAllocations": [
            {"id": "1", "projectId": "1", "employeeId": "1", "allocationPercentage": 80, "role": "Developer",
             "status": "ACTIVE", "startDate": "2024-01-01", "createdAt": _SEED_TS, "updatedAt": _SEED_TS},
        ],
        "taskAllocations": [
            {"id": "1", "taskId": "1", "projectId": "1", "employeeId": "1", "hours": 16,
             "status": "IN_PROGRESS", "createdAt": _SEED_TS, "updatedAt": _SEED_TS},
        ],
        "trainings": [
            {"id": "1", "name": "Advanced React", "description": "Advanced React course", "provider": "Udemy",
             "type": "ONLINE_COURSE", "status": "IN_PROGRESS", "startDate": "2024-01-15", "endDate": "2024-03-15",
             "difficulty": "ADVANCED", "employeeId": "1", "createdAt": _SEED_TS, "updatedAt": _SEED_TS},
            {"id": "2", "name": "TypeScript Fundamentals", "description": "Complete TypeScript course",
             "provider": "Pluralsight", "type": "ONLINE_COURSE", "status": "COMPLETED", "startDate": "2023-11-01",
             "endDate": "2023-12-15", "difficulty": "INTERMEDIATE", "employeeId": "1",
             "createdAt": "2023-11-01T00:00:00.000Z", "updatedAt": "2023-12-15T00:00:00.000Z"},
        ],
        "goals": [
            {"id": "1", "employeeId": "1", "title": "Complete project X", "description": "Finish the project by June",
             "type": "PROJECT", "priority": "HIGH", "status": "IN_PROGRESS", "startDate": "2024-01-01",
             "targetDate": "2024-06-30", "progress": 0.45, "createdAt": _SEED_TS, "updatedAt": _SEED_TS},
            {"id": "2", "employeeId": "1", "title": "Advanced React course",
             "description": "Complete the advanced React course on Udemy", "type": "DEVELOPMENT",
             "priority": "MEDIUM", "status": "IN_PROGRESS", "startDate": "2024-01-15", "targetDate": "2024-03-15",
             "progress": 0.75, "createdAt": "2024-01-15T00:00:00.000Z", "updatedAt": "2024-01-15T00:00:00.000Z"},
        ],
        "performanceReviews": [
            {"id": "1", "employeeId": "1", "reviewerId": "2", "periodStart": "2024-01-01", "periodEnd": "2024-03-31",
             "status": "COMPLETED", "overallRating": 4.5, "strengths": ["Good teamwork", "Proactive"],
             "improvements": ["Improve communication"],
             "createdAt": "2024-04-01T00:00:00.000Z", "updatedAt": "2024-04-01T00:00:00.000Z"},
        ],
        "feedback": [],
        "knowledgeBase": [
            {"id": "1", "title": "Onboarding guide", "category": "HR", "content": "Steps for the first week.",
             "tags": ["onboarding"], "createdAt": _SEED_TS, "updatedAt": _SEED_TS},
        ],
        "achievements": [
            {"id": "1", "employeeId": "1", "title": "TypeScript Certification",
             "description": "Official TypeScript certification by Microsoft", "type": "CERTIFICATION",
             "earnedAt": "2023-12-15", "issuer": "Microsoft", "certificateUrl": "https://example.com/certificate-ts",
             "createdAt": "2023-12-15T00:00:00.000Z", "updatedAt": "2023-12-15T00:00:00.000Z"},
            {"id": "2", "employeeId": "1", "title": "React Expert Badge",
             "description": "Earned by completing 10 React projects", "type": "BADGE", "earnedAt": "2024-01-10",
             "issuer": "Company", "createdAt": "2024-01-10T00:00:00.000Z", "updatedAt": "2024-01-10T00:00:00.000Z"},
            {"id": "3", "employeeId": "1", "title": "Employee of the Month",
             "description": "Recognition for excellent performance in January", "type": "AWARD",
             "earnedAt": "2024-02-01", "issuer": "Company",
             "createdAt": "2024-02-01T00:00:00.000Z", "updatedAt": "2024-02-01T00:00:00.000Z"},
        ],
        "mentoring": [
            {"id": "1", "mentorId": "2", "menteeId": "1", "status": "ACTIVE", "startDate": "2024-01-15", "endDate": None,
             "createdAt": "2024-01-15T00:00:00.000Z", "updatedAt": "2024-01-15T00:00:00.000Z"},
            {"id": "2", "mentorId": "3", "menteeId": "2", "status": "ACTIVE", "startDate": "2024-02-01", "endDate": None,
             "createdAt": "2024-02-01T00:00:00.000Z", "updatedAt": "2024-02-01T00:00:00.000Z"},
            {"id": "3", "mentorId": "2", "menteeId": "3", "status": "COMPLETED", "startDate": "2023-06-01",
             "endDate": "2023-12-31", "createdAt": "2023-06-01T00:00:00.000Z", "updatedAt": "2023-12-31T00:00:00.000Z"},
        ],
        "skillProficiencies": [],
        "leaveTypes": leave_types,
        "leaveRequests": [
            {"id": "1", "employeeId": "1", "leaveTypeId": "1", "startDate": "2024-02-15", "endDate": "2024-02-19",
             "days": 5, "reason": "Planned vacation", "status": "PENDING",
             "createdAt": "2024-01-15T00:00:00.000Z", "updatedAt": "2024-01-15T00:00:00.000Z"},
        ],
        "leaveBalances": [
            {"id": "1", "employeeId": "1", "leaveTypeId": "1", "balance": 25, "accrued": 30, "used": 5, "year": 2024},
            {"id": "2", "employeeId": "1", "leaveTypeId": "2", "balance": 15, "accrued": 15, "used": 0, "year": 2024},
        ],
        "attendance": [
            {"id": "1", "employeeId": "1", "date": "2024-03-04", "checkIn": "09:00:00", "checkOut": "18:00:00",
             "workHours": 9, "status": "PRESENT", "createdAt": "2024-03-04T09:00:00.000Z", "updatedAt": "2024-03-04T18:00:00.000Z"},
            {"id": "2", "employeeId": "1", "date": "2024-03-05", "checkIn": "09:40:00", "checkOut": "18:10:00",
             "workHours": 8.5, "status": "LATE", "createdAt": "2024-03-05T09:40:00.000Z", "updatedAt": "2024-03-05T18:10:00.000Z"},
            {"id": "3", "employeeId": "1", "date": "2024-03-06", "checkIn": "08:55:00", "checkOut": "19:00:00",
             "workHours": 10.0833, "overtimeHours": 1, "status": "PRESENT",
             "createdAt": "2024-03-06T08:55:00.000Z", "updatedAt": "2024-03-06T19:00:00.000Z"},
            {"id": "4", "employeeId": "2", "date": "2024-03-04", "checkIn": "08:30:00", "checkOut": "17:30:00",
             "workHours": 9, "status": "PRESENT", "createdAt": "2024-03-04T08:30:00.000Z", "updatedAt": "2024-03-04T17:30:00.000Z"},
        ],
        "workSchedules": [
            {"id": "1", "name": "Standard Schedule", "startTime": "09:00", "endTime": "18:00", "breakDuration": 60,
             "workDays": [1, 2, 3, 4, 5], "isDefault": True, "createdAt": _SEED_TS, "updatedAt": _SEED_TS},
        ],
        "attendanceJustifications": [],
        "attendanceMirrorSignatures": [],
        "payrolls": _payrolls(),
        "payrollCycles": [
            {"id": "1", "referenceMonth": "2024-03", "status": "CALCULATED", "totalEmployees": 3,
             "totalGross": 26000, "totalDeductions": 5200, "totalNet": 20800, "paymentDate": "2024-04-05",
             "calculatedAt": "2024-03-25T10:00:00.000Z",
             "createdAt": "2024-03-20T00:00:00.000Z", "updatedAt": "2024-03-25T10:00:00.000Z"},
        ],
        "departmentPayrollSummaries": [
            {"id": "1", "payrollCycleId": "1", "departmentId": "1", "employeeCount": 3, "totalGross": 26000,
             "totalDeductions": 5200, "totalNet": 20800, "status": "CALCULATED"},
        ],
        "costCenterPayrollSummaries": [
            {"id": "1", "payrollCycleId": "1", "costCenterId": "CC-100", "costCenterName": "Engineering",
             "departmentId": "1", "employeeCount": 3, "totalGross": 26000, "totalDeductions": 5200, "totalNet": 20800},
        ],
        "employeePayrollDetails": [
            {"id": str(i), "payrollCycleId": "1", "employeeId": e["id"], "departmentId": e["departmentId"],
             "baseSalary": e["salary"], "grossSalary": e["salary"], "totalDeductions": e["salary"] // 5,
             "netSalary": e["salary"] - e["salary"] // 5, "status": "CALCULATED"}
            for i, e in enumerate(employees, 1)
        ],
        "payrollApprovals": [
            {"id": "1", "payrollCycleId": "1", "approverId": "2", "status": "PENDING",
             "createdAt": "2024-03-25T10:05:00.000Z"},
        ],
        "payrollNotifications": [],
        "payrollReports": [
            {"id": "1", "payrollCycleId": "1", "reportType": "SUMMARY", "format": "PDF",
             "generatedAt": "2024-03-25T11:00:00.000Z", "generatedBy": "2"},
        ],
        "benefits": benefits,
        "enrollments": [
            {"id": "1", "employeeId": "1", "benefitId": "1", "status": "ACTIVE", "enrolledAt": "2024-01-10T00:00:00.000Z",
             "dependents": [], "benefit": copy.deepcopy(benefits[0])},
        ],
        "jobs": [
            {"id": "1", "title": "Senior Backend Engineer", "departmentId": "1", "location": "São Paulo",
             "type": "FULL_TIME", "status": "OPEN", "postedAt": "2024-02-01T00:00:00.000Z"},
            {"id": "2", "title": "HR Business Partner", "departmentId": "2", "location": "Remote",
             "type": "FULL_TIME", "status": "DRAFT", "postedAt": "2024-02-15T00:00:00.000Z"},
        ],
        "candidates": [
            {"id": "1", "name": "Lucas Ferreira", "email": "lucas.ferreira@example.com", "jobId": "1",
             "status": "NEW", "appliedAt": "2024-02-05T00:00:00.000Z"},
            {"id": "2", "name": "Beatriz Lima", "email": "beatriz.lima@example.com", "jobId": "1",
             "status": "SCREENING", "appliedAt": "2024-02-06T00:00:00.000Z"},
            {"id": "3", "name": "Rafael Souza", "email": "rafael.souza@example.com", "jobId": "2",
             "status": "INTERVIEW", "appliedAt": "2024-02-20T00:00:00.000Z"},
        ],
        "applications": [
            {"id": "1", "candidateId": "1", "jobId": "1", "status": "PENDING", "appliedAt": "2024-02-05T00:00:00.000Z"},
        ],
        "pipelineConfigs": [default_pipeline_config()],
        "contractors": contractors,
        "contractLabor": [
            {"id": "1", "contractorId": "1", "projectId": "1", "workerName": "Carlos Mendes", "role": "QA Analyst",
             "hourlyRate": 85, "status": "ACTIVE", "startDate": "2024-02-01",
             "contractor": copy.deepcopy(contractors[0]), "project": copy.deepcopy(projects[0]),
             "createdAt": "2024-02-01T00:00:00.000Z", "updatedAt": "2024-02-01T00:00:00.000Z"},
        ],
        "contractLaborAttendance": [],
        "notifications": [
            {"id": "1", "userId": "1", "title": "Leave request update", "message": "Your vacation request was approved",
             "type": "LEAVE", "status": "UNREAD", "read": False, "createdAt": "2024-02-16T08:00:00.000Z"},
        ],
        "policies": [
            {"id": "1", "title": "Code of Conduct Policy", "description": "Professional behavior guidelines",
             "content": "Policy content...", "category": "HR", "version": "1.0", "status": "ACTIVE",
             "requiresAcknowledgment": True, "effectiveDate": "2024-01-01", "createdBy": "1",
             "createdAt": _SEED_TS, "updatedAt": _SEED_TS},
            {"id": "2", "title": "Information Security Policy", "description": "Data security guidelines",
             "content": "Policy content...", "category": "IT", "version": "2.0", "status": "ACTIVE",
             "requiresAcknowledgment": True, "effectiveDate": "2024-02-01", "createdBy": "1",
             "createdAt": "2024-02-01T00:00:00.000Z", "updatedAt": "2024-02-01T00:00:00.000Z"},
        ],
        "policyAcknowledgments": [],
        "separations": [
            {"id": "1", "employeeId": "3", "type": "VOLUNTARY", "reason": "New opportunity", "lastWorkingDay": "2024-04-30",
             "status": "INITIATED", "exitInterviewCompleted": False, "checklist": [], "initiatedBy": "2",
             "createdAt": "2024-03-15T00:00:00.000Z", "updatedAt": "2024-03-15T00:00:00.000Z"},
        ],
        "expenses": [],
        "expenseReports": [],
        "conferenceRooms": rooms,
        "roomBookings": [],
        "travelRequests": [],
        "surveys": [
            {"id": "1", "title": "Engagement Survey 2024", "description": "Annual engagement survey", "status": "ACTIVE",
             "startDate": "2024-01-01T00:00:00.000Z", "endDate": "2099-12-31T23:59:59.000Z", "createdBy": "2",
             "questions": [{"id": "q1", "text": "How satisfied are you with your team?", "type": "RATING"}],
             "createdAt": _SEED_TS, "updatedAt": _SEED_TS},
        ],
        "surveyResponses": [],
        "insights": [
            {"id": "1", "title": "High turnover in the IT department",
             "description": "Turnover rate increased 15% in the last quarter", "type": "WARNING", "priority": "HIGH",
             "createdAt": "2024-03-01T00:00:00.000Z"},
            {"id": "2", "title": "Above-average performance", "description": "Sales team showed excellent results",
             "type": "SUCCESS", "priority": "MEDIUM", "createdAt": "2024-03-01T00:00:00.000Z"},
        ],
    }
    for m in data["mentoring"]:
        m["mentor"] = copy.deepcopy(emp.get(m["mentorId"]))
        m["mentee"] = copy.deepcopy(emp.get(m["menteeId"]))
    data.update(_analytics_singletons())
    return data
