"""Demo data set loaded at start-up when SEED_DEMO_DATA is enabled."""

EMPLOYEES = [
    {
        "employee_id": 1,
        "name": "Sibongile Nkosi",
        "position": "Software Engineer",
        "department": "Development",
        "salary": 70000,
        "contact": "sibongile.nkosi@moderntech.com",
        "employment_history": "Joined in 2015, promoted to Senior in 2018",
    },
    {
        "employee_id": 2,
        "name": "Lungile Moyo",
        "position": "HR Manager",
        "department": "HR",
        "salary": 80000,
        "contact": "lungile.moyo@moderntech.com",
        "employment_history": "Joined in 2013, promoted to Manager in 2017",
    },
    {
        "employee_id": 3,
        "name": "Thabo Molefe",
        "position": "Quality Analyst",
        "department": "QA",
        "salary": 55000,
        "contact": "thabo.molefe@moderntech.com",
        "employment_history": "Joined in 2018",
    },
    {
        "employee_id": 4,
        "name": "Keshav Naidoo",
        "position": "Sales Representative",
        "department": "Sales",
        "salary": 60000,
        "contact": "keshav.naidoo@moderntech.com",
        "employment_history": "Joined in 2020",
    },
    {
        "employee_id": 5,
        "name": "Zanele Khumalo",
        "position": "Marketing Specialist",
        "department": "Marketing",
        "salary": 58000,
        "contact": "zanele.khumalo@moderntech.com",
        "employment_history": "Joined in 2019",
    },
    {
        "employee_id": 6,
        "name": "Sipho Zulu",
        "position": "UI/UX Designer",
        "department": "Design",
        "salary": 65000,
        "contact": "sipho.zulu@moderntech.com",
        "employment_history": "Joined in 2016",
    },
    {
        "employee_id": 7,
        "name": "Naledi Ndlovu",
        "position": "DevOps Engineer",
        "department": "IT",
        "salary": 72000,
        "contact": "naledi.ndlovu@moderntech.com",
        "employment_history": "Joined in 2017",
    },
    {
        "employee_id": 8,
        "name": "Farai Gumbo",
        "position": "Content Strategist",
        "department": "Marketing",
        "salary": 56000,
        "contact": "farai.gumbo@moderntech.com",
        "employment_history": "Joined in 2021",
    },
    {
        "employee_id": 9,
        "name": "Karabo Dlamini",
        "position": "Accountant",
        "department": "Finance",
        "salary": 62000,
        "contact": "karabo.dlamini@moderntech.com",
        "employment_history": "Joined in 2018",
    },
    {
        "employee_id": 10,
        "name": "Fatima Patel",
        "position": "Customer Support Lead",
        "department": "Support",
        "salary": 58000,
        "contact": "fatima.patel@moderntech.com",
        "employment_history": "Joined in 2016",
    },
]

_WEEK = ["2025-07-25", "2025-07-26", "2025-07-27", "2025-07-28", "2025-07-29"]


def _week(*statuses: str) -> list[dict]:
    return [{"date": d, "status": s} for d, s in zip(_WEEK, statuses)]


ATTENDANCE = [
    {
        "employee_id": 1,
        "attendance": _week("Present", "Absent", "Present", "Present", "Present"),
        "leave_requests": [
            {"date": "2025-07-22", "reason": "Sick Leave", "status": "Approved"},
            {"date": "2024-12-01", "reason": "Personal", "status": "Pending"},
        ],
    },
    {
        "employee_id": 2,
        "attendance": _week("Present", "Present", "Absent", "Present", "Present"),
        "leave_requests": [
            {"date": "2025-07-15", "reason": "Family Responsibility", "status": "Denied"},
            {"date": "2024-12-02", "reason": "Vacation", "status": "Approved"},
        ],
    },
    {
        "employee_id": 3,
        "attendance": _week("Present", "Present", "Present", "Absent", "Present"),
        "leave_requests": [
            {"date": "2025-07-10", "reason": "Medical Appointment", "status": "Approved"},
            {"date": "2024-12-05", "reason": "Personal", "status": "Pending"},
        ],
    },
    {
        "employee_id": 4,
        "attendance": _week("Present", "Present", "Present", "Present", "Absent"),
        "leave_requests": [{"date": "2025-07-20", "reason": "Bereavement", "status": "Approved"}],
    },
    {
        "employee_id": 5,
        "attendance": _week("Present", "Present", "Absent", "Present", "Present"),
        "leave_requests": [{"date": "2024-12-01", "reason": "Childcare", "status": "Pending"}],
    },
    {
        "employee_id": 6,
        "attendance": _week("Present", "Present", "Absent", "Present", "Present"),
        "leave_requests": [{"date": "2025-07-18", "reason": "Sick Leave", "status": "Approved"}],
    },
    {
        "employee_id": 7,
        "attendance": _week("Present", "Present", "Present", "Absent", "Present"),
        "leave_requests": [{"date": "2025-07-22", "reason": "Vacation", "status": "Pending"}],
    },
    {
        "employee_id": 8,
        "attendance": _week("Present", "Absent", "Present", "Present", "Present"),
        "leave_requests": [{"date": "2024-12-02", "reason": "Medical Appointment", "status": "Approved"}],
    },
    {
        "employee_id": 9,
        "attendance": _week("Present", "Present", "Absent", "Present", "Present"),
        "leave_requests": [{"date": "2025-07-19", "reason": "Childcare", "status": "Denied"}],
    },
    {
        "employee_id": 10,
        "attendance": _week("Present", "Present", "Present", "Absent", "Present"),
        "leave_requests": [{"date": "2024-12-03", "reason": "Vacation", "status": "Pending"}],
    },
]

PAYROLL = [
    {"employee_id": 1, "hours_worked": 160, "leave_deductions": 8, "final_salary": 69500},
    {"employee_id": 2, "hours_worked": 150, "leave_deductions": 10, "final_salary": 79000},
    {"employee_id": 3, "hours_worked": 170, "leave_deductions": 4, "final_salary": 54800},
    {"employee_id": 4, "hours_worked": 165, "leave_deductions": 6, "final_salary": 59700},
    {"employee_id": 5, "hours_worked": 158, "leave_deductions": 5, "final_salary": 57850},
    {"employee_id": 6, "hours_worked": 168, "leave_deductions": 2, "final_salary": 64800},
    {"employee_id": 7, "hours_worked": 175, "leave_deductions": 3, "final_salary": 71800},
    {"employee_id": 8, "hours_worked": 160, "leave_deductions": 0, "final_salary": 56000},
    {"employee_id": 9, "hours_worked": 155, "leave_deductions": 5, "final_salary": 61500},
    {"employee_id": 10, "hours_worked": 162, "leave_deductions": 4, "final_salary": 57750},
]
