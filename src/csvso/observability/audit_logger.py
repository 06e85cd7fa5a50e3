import json
import uuid
from datetime import datetime, timezone
from typing import Dict, Optional

from csvso.observability.logger import Colors, colorize, logger


class AuditLogger:
    """
    Responsible for building and persisting audit records.
    One record per Generate / Import / Export operation.
    """
    def build_record(
        self,
        request_id: str,
        user_id: str,
        action: str,
        class_name: str,
        decision: str,
        records: Optional[int] = None,
        path: Optional[str] = None,
    ) -> Dict:
        return {
            "audit_id": str(uuid.uuid4()),
            "request_id": request_id,
            "user_id": user_id,
            "action": action,
            "class_name": class_name,
            "decision": decision,
            "records": records,
            "path": path,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

    def persist(self, record: Dict):
        """
        Structured log output on the shared logger.
        """
        text = json.dumps({"AUDIT_EVENT": record}, ensure_ascii=False)
        logger.info(colorize(text, Colors.CYAN))
