from __future__ import annotations

from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # Logging
    log_level: str = "INFO"

    # 자동 생성 파라미터 접두사 (ParamNamer 기본값)
    param_prefix_base: str = "kw"

    # 조건 템플릿: {field} = 필드 표현식, {param} = 바인드 파라미터 이름
    collapsed_template: str = "REPLACE({field}, ' ', '') LIKE :{param} ESCAPE '\\'"
    literal_template: str = "{field} LIKE :{param} ESCAPE '\\'"
    pattern_template: str = "{field} REGEXP :{param}"

    @field_validator("collapsed_template", "literal_template", "pattern_template")
    @classmethod
    def check_placeholders(cls, value: str) -> str:
        for placeholder in ("{field}", "{param}"):
            if placeholder not in value:
                raise ValueError(f"조건 템플릿에 {placeholder} 자리표시자가 없습니다: {value!r}")
        return value


settings = Settings()
