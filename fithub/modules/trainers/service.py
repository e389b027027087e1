from supabase import Client
from fithub.modules.trainers.schemas import TrainerCreate, TrainerResponse, TrainerClientResponse
from fithub.core.db_errors import to_http_exception, TRAINER_CAPACITY
from typing import List, Dict
from fastapi import HTTPException
import logging

logger = logging.getLogger(__name__)


class TrainerService:
    def __init__(self, supabase: Client, service_supabase: Client):
        self.supabase = supabase
        # users has no RLS policies; roles are written with the service client
        self.service_supabase = service_supabase

    def _active_client_counts(self, trainer_ids: List[str]) -> Dict[str, int]:
        """Active memberships per trainer (the same count the capacity trigger checks)"""
        if not trainer_ids:
            return {}
        result = self.supabase.table("user_memberships")\
            .select("trainer_id")\
            .in_("trainer_id", trainer_ids)\
            .eq("status", "active")\
            .execute()
        counts = {trainer_id: 0 for trainer_id in trainer_ids}
        for row in result.data or []:
            if row.get("trainer_id") in counts:
                counts[row["trainer_id"]] += 1
        return counts

    def _profile_names(self, user_ids: List[str]) -> Dict[str, str]:
        if not user_ids:
            return {}
        result = self.supabase.table("profiles")\
            .select("id, full_name")\
            .in_("id", user_ids)\
            .execute()
        return {p["id"]: p.get("full_name") for p in result.data or []}

    def _to_response(self, row: dict, names: Dict[str, str], counts: Dict[str, int]) -> TrainerResponse:
        return TrainerResponse(
            **row,
            full_name=names.get(row["id"]),
            active_clients=counts.get(row["id"], 0),
            capacity=TRAINER_CAPACITY,
        )

    def list_trainers(self) -> List[TrainerResponse]:
        """List trainers with their names and current active client load"""
        try:
            result = self.supabase.table("trainers")\
                .select("*")\
                .order("experience_years", desc=True)\
                .execute()
            rows = result.data or []
            ids = [t["id"] for t in rows]
            names = self._profile_names(ids)
            counts = self._active_client_counts(ids)
            return [self._to_response(t, names, counts) for t in rows]
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    def create_trainer(self, trainer_data: TrainerCreate) -> TrainerResponse:
        """Promote an existing member to trainer"""
        try:
            profile = self.supabase.table("profiles")\
                .select("id, full_name")\
                .eq("id", trainer_data.user_id)\
                .maybe_single()\
                .execute()
            if not profile or not profile.data:
                raise HTTPException(status_code=404, detail="Profile not found")

            insert_data = trainer_data.model_dump(exclude={"user_id"})
            insert_data["id"] = trainer_data.user_id
            result = self.supabase.table("trainers").insert(insert_data).execute()
            if not result.data:
                raise HTTPException(status_code=500, detail="Failed to create trainer")

            try:
                role_result = self.service_supabase.table("users")\
                    .update({"role": "trainer"})\
                    .eq("id", trainer_data.user_id)\
                    .execute()
                if not role_result.data:
                    raise HTTPException(status_code=404, detail="User not found")
            except Exception:
                self._remove_trainer_row(trainer_data.user_id)
                raise

            logger.info(f"Promoted user {trainer_data.user_id} to trainer")
            return self._to_response(
                result.data[0],
                {trainer_data.user_id: profile.data.get("full_name")},
                {},
            )
        except Exception as e:
            raise to_http_exception(e)

    def _remove_trainer_row(self, trainer_id: str):
        """Undo a trainers insert whose role update did not go through"""
        try:
            self.supabase.table("trainers").delete().eq("id", trainer_id).execute()
            logger.warning(f"Rolled back trainer row for {trainer_id}")
        except Exception as e:
            logger.error(f"Failed to roll back trainer row for {trainer_id}: {e}")

    def get_trainer_clients(self, trainer_id: str) -> List[TrainerClientResponse]:
        """Active clients of a trainer from the trainer_clients view"""
        try:
            result = self.supabase.table("trainer_clients")\
                .select("*")\
                .eq("trainer_id", trainer_id)\
                .order("end_date")\
                .execute()
            return [TrainerClientResponse(**row) for row in result.data or []]
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))
