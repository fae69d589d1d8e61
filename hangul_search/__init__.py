"""한글 퍼지 검색 조건 컴파일러."""
