import os
import logging
from typing import Optional, List

import pandas as pd
from openpyxl import Workbook
from openpyxl.styles import Font, Alignment, Border, Side, PatternFill
from openpyxl.utils import get_column_letter
from openpyxl.utils.dataframe import dataframe_to_rows

from config import EXPORT_FOLDER
from models import Student


class ExcelHandler:
    HEADERS = ['Roll No', 'Name', 'Email', 'Course', 'Marks']

    def __init__(self, export_folder: str = EXPORT_FOLDER):
        self.logger = logging.getLogger(__name__)
        self.export_folder = export_folder

    def students_to_dataframe(self, students: List[Student]) -> pd.DataFrame:
        return pd.DataFrame(
            [student.to_dict() for student in students],
            columns=['roll_no', 'name', 'email', 'course', 'marks']
        )

    def course_summary(self, students: List[Student]) -> pd.DataFrame:
        """
        Per-course statistics: number of students and average/min/max marks.
        """
        df = self.students_to_dataframe(students)
        columns = ['Course', 'Students', 'Average Marks', 'Lowest Marks', 'Highest Marks']
        if df.empty:
            return pd.DataFrame(columns=columns)

        summary = df.groupby('course')['marks'].agg(['count', 'mean', 'min', 'max']).reset_index()
        summary.columns = columns
        summary['Average Marks'] = summary['Average Marks'].round(2)
        return summary

    def export_roster(self, students: List[Student], filename: str = 'student_roster.xlsx') -> Optional[str]:
        """
        Export the roster to an Excel workbook with a styled roster sheet and
        a per-course summary sheet.
        """
        try:
            os.makedirs(self.export_folder, exist_ok=True)

            wb = Workbook()
            ws = wb.active
            ws.title = "Roster"

            # Set up styles
            header_font = Font(bold=True, size=12, color="FFFFFF")
            header_fill = PatternFill(start_color="366092", end_color="366092", fill_type="solid")
            border = Border(
                left=Side(style='thin'),
                right=Side(style='thin'),
                top=Side(style='thin'),
                bottom=Side(style='thin')
            )
            center_alignment = Alignment(horizontal='center', vertical='center')

            ws['A1'] = "Student Roster"
            ws['A1'].font = Font(bold=True, size=14)
            ws.merge_cells('A1:E1')

            for col, header in enumerate(self.HEADERS, 1):
                cell = ws.cell(row=3, column=col, value=header)
                cell.font = header_font
                cell.fill = header_fill
                cell.border = border
                cell.alignment = center_alignment

            row_num = 4
            for student in students:
                row_data = [student.roll_no, student.name, student.email, student.course, student.marks]
                for col, value in enumerate(row_data, 1):
                    cell = ws.cell(row=row_num, column=col, value=value)
                    cell.border = border
                row_num += 1

            ws.cell(row=row_num + 1, column=1, value="Summary:").font = Font(bold=True)
            ws.cell(row=row_num + 2, column=1, value=f"Total Students: {len(students)}")
            if students:
                average = sum(student.marks for student in students) / len(students)
                ws.cell(row=row_num + 3, column=1, value=f"Average Marks: {average:.2f}")

            self._autosize_columns(ws, len(self.HEADERS))

            summary_ws = wb.create_sheet("Course Summary")
            for r_idx, row in enumerate(dataframe_to_rows(self.course_summary(students), index=False, header=True), 1):
                for c_idx, value in enumerate(row, 1):
                    cell = summary_ws.cell(row=r_idx, column=c_idx, value=value)
                    cell.border = border
                    if r_idx == 1:
                        cell.font = header_font
                        cell.fill = header_fill
                        cell.alignment = center_alignment

            self._autosize_columns(summary_ws, 5)

            filepath = os.path.join(self.export_folder, filename)
            wb.save(filepath)

            self.logger.info(f"Exported roster to {filepath}")
            return filepath

        except Exception as e:
            self.logger.error(f"Error exporting roster: {str(e)}")
            return None

    def _autosize_columns(self, ws, column_count: int):
        for col_idx in range(1, column_count + 1):
            column_letter = get_column_letter(col_idx)
            max_length = 0
            for row_idx in range(1, ws.max_row + 1):
                cell = ws.cell(row=row_idx, column=col_idx)
                if cell.value is not None:
                    max_length = max(max_length, len(str(cell.value)))
            ws.column_dimensions[column_letter].width = min(max_length + 2, 50)  # Cap at 50 characters
