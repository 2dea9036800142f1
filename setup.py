from setuptools import find_packages, setup

setup(
    name="car-service-booking",
    version="1.0.0",
    packages=find_packages(include=["carservice_shared*", "booking_api*"]),
    package_dir={"": "."},
    python_requires=">=3.9",
    install_requires=[
        "sqlalchemy>=2.0.0",
        "psycopg2-binary>=2.9",
        "loguru>=0.7.0",
        "python-dotenv>=1.0.0",
        "pydantic[email]>=2.0",
        "pydantic-settings>=2.0",
        "fastapi>=0.100",
        "uvicorn[standard]>=0.23",
        "prometheus-client>=0.17",
        "prometheus-fastapi-instrumentator>=6.1",
        "PyJWT>=2.8",
        "passlib[bcrypt]>=1.7.4",
        "bcrypt>=4.0,<4.1",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "httpx>=0.24",
        ],
    },
    entry_points={
        "console_scripts": [
            "car-service-api=booking_api.main:main",
            "car-service-seed=booking_api.db.seed:main",
        ],
    },
)
