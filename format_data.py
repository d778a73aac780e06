#!/usr/bin/env python3
"""
Registration Dataset Builder
============================
Generates a synthetic registration file for the exam slot scheduler from
base inputs: students.csv (student_id, ...) and courses.csv (course_id, ...).

Outputs (data/generated/):
  - enrollments.csv
  - student_courses.txt   one STUDENT|C1,C2,... line per student
  - conflict_edges.csv
  - summary.txt
"""

import os
import random
from itertools import combinations

import pandas as pd

# -----------------------------
# CONFIGURATION
# -----------------------------
BASE_PATH = "data"
OUTPUT_PATH = os.path.join(BASE_PATH, "generated")

RANDOM_SEED = 42
MIN_COURSES = 3
MAX_COURSES = 6


def make_enrollments(students: pd.DataFrame, courses: pd.DataFrame, rng: random.Random) -> pd.DataFrame:
    course_ids = list(courses["course_id"])
    rows = []
    for sid in students["student_id"]:
        n = rng.randint(MIN_COURSES, min(MAX_COURSES, len(course_ids)))
        for cid in rng.sample(course_ids, n):
            rows.append({"student_id": sid, "course_id": cid})
    return pd.DataFrame(rows, columns=["student_id", "course_id"])


def registration_lines(enroll_df: pd.DataFrame):
    grouped = enroll_df.groupby("student_id")["course_id"].apply(lambda x: ",".join(map(str, x)))
    return [f"{sid}|{courses}" for sid, courses in grouped.items()]


def conflict_edges(enroll_df: pd.DataFrame) -> pd.DataFrame:
    edges = set()
    for _, g in enroll_df.groupby("student_id"):
        for a, b in combinations(sorted(map(str, g["course_id"].unique())), 2):
            edges.add((a, b))
    return pd.DataFrame(sorted(edges), columns=["course1", "course2"])


def main():
    os.makedirs(OUTPUT_PATH, exist_ok=True)
    rng = random.Random(RANDOM_SEED)

    # -----------------------------
    # STEP 1: LOAD BASE DATA
    # -----------------------------
    students = pd.read_csv(os.path.join(BASE_PATH, "students.csv"))
    courses = pd.read_csv(os.path.join(BASE_PATH, "courses.csv"))
    print(f"✅ Loaded: {len(students)} students, {len(courses)} courses.")

    # -----------------------------
    # STEP 2: GENERATE ENROLLMENTS
    # -----------------------------
    enroll_df = make_enrollments(students, courses, rng)
    enroll_df.to_csv(os.path.join(OUTPUT_PATH, "enrollments.csv"), index=False)
    print(f"📘 Enrollments created: {len(enroll_df)} records")

    # -----------------------------
    # STEP 3: REGISTRATION FILE + CONFLICTS
    # -----------------------------
    lines = registration_lines(enroll_df)
    with open(os.path.join(OUTPUT_PATH, "student_courses.txt"), "w") as f:
        f.write("\n".join(lines) + "\n")
    print(f"🧑‍🎓 student_courses.txt saved ({len(lines)} students)")

    edges_df = conflict_edges(enroll_df)
    edges_df.to_csv(os.path.join(OUTPUT_PATH, "conflict_edges.csv"), index=False, header=False)
    print(f"⚡ Conflict graph has {len(edges_df)} edges.")

    # -----------------------------
    # STEP 4: SUMMARY FILE
    # -----------------------------
    summary = f"""
==== Exam Registration Dataset ====
Students:          {len(students)}
Courses:           {len(courses)}
Enrollments:       {len(enroll_df)}
Conflicts:         {len(edges_df)}

Average Courses/Student: {enroll_df.groupby('student_id').size().mean():.2f}
-----------------------------------
Output Directory: {os.path.abspath(OUTPUT_PATH)}
"""
    with open(os.path.join(OUTPUT_PATH, "summary.txt"), "w") as f:
        f.write(summary)
    print(summary)


if __name__ == "__main__":
    main()
